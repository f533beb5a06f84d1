"""Rich terminal output for the arena CLI."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hero_arena.errors import ArenaError
from hero_arena.mechanics.combat import CombatOutcome
from hero_arena.models.player import LatestPlayer

console = Console()


class Display:
    def __init__(self) -> None:
        self.console = console

    def show_roster(self, game_id: int, roster: list[tuple[str, LatestPlayer]]) -> None:
        if not roster:
            self.console.print(f"[dim]Game {game_id} has no players left.[/dim]")
            return
        table = Table(title=f"Game {game_id}", box=box.SIMPLE)
        table.add_column("Account", style="cyan")
        table.add_column("Name")
        table.add_column("Class")
        table.add_column("Health", justify="right")
        table.add_column("Level", justify="right")
        table.add_column("Items")
        for account_id, player in roster:
            items = ", ".join(i.value for i in player.items) or "-"
            table.add_row(
                account_id, player.name, player.hero_class.value,
                str(player.health), str(player.level), items,
            )
        self.console.print(table)

    def show_outcome(self, outcome: CombatOutcome) -> None:
        content = Text()
        content.append(f"{outcome.actor_id} uses {outcome.ability.value} on {outcome.target_id}\n\n", style="bold")
        content.append(f"Damage dealt: {outcome.damage_to_target}")
        if outcome.critical_bonus:
            content.append(f" (critical +{outcome.critical_bonus})", style="bold yellow")
        content.append("\n")
        content.append(f"{outcome.actor_id}: {outcome.actor_health} health, level {outcome.actor_level}\n")
        content.append(f"{outcome.target_id}: {outcome.target_health} health\n")
        for account_id in outcome.deaths:
            content.append(f"{account_id} died!\n", style="bold red")
        self.console.print(Panel(content, border_style="red", box=box.ROUNDED))

    def show_error(self, error: ArenaError) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {error}")
        self.console.print(error.to_event().to_json(), markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show_info(self, message: str) -> None:
        self.console.print(f"[bold blue]Info:[/bold blue] {message}")

    def show_success(self, message: str) -> None:
        self.console.print(f"[bold green]{message}[/bold green]")
