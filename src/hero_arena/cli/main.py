"""Typer CLI application."""
from __future__ import annotations

import logging
from typing import Optional

import typer

from hero_arena.models.game import MAX_GAME_ID
from hero_arena.models.hero import HeroClass

app = typer.Typer(
    name="hero-arena",
    help="Turn-based hero duels backed by a persistent game store",
    no_args_is_help=True,
)

_state: dict = {}


@app.callback()
def main(
    db: Optional[str] = typer.Option(None, "--db", help="Path to the SQLite game store"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    """Configure storage and logging for every command."""
    from hero_arena.arena import Arena

    arena = Arena(db_path=db)
    level = "DEBUG" if verbose else arena.config.get("logging", {}).get("level", "WARNING")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    _state["arena"] = arena


def _arena():
    return _state["arena"]


def _run(fn, *args):
    """Call an arena operation, turning arena errors into a message and exit code 1."""
    from hero_arena.cli.display import Display
    from hero_arena.errors import ArenaError

    try:
        return fn(*args)
    except ArenaError as exc:
        Display().show_error(exc)
        raise typer.Exit(code=1)
    finally:
        _arena().close()


@app.command()
def register(
    hero_class: HeroClass = typer.Argument(..., help="Hero class"),
    name: str = typer.Argument(..., help="Display name, at most 16 characters"),
    game_id: int = typer.Argument(..., min=0, max=MAX_GAME_ID, help="Game to join"),
    account: str = typer.Option(..., "--account", "-a", help="Your account id"),
) -> None:
    """Join a game as a new hero (overwrites your previous hero in that game)."""
    from hero_arena.cli.display import Display

    player = _run(_arena().register, account, hero_class, name, game_id)
    Display().show_success(
        f"{player.name} the {player.hero_class.value} joins game {game_id} "
        f"with {player.health} health at level {player.level}."
    )


@app.command()
def use(
    ability: str = typer.Argument(..., help="Ability name, e.g. strike or bonk"),
    target: str = typer.Argument(..., help="Target account id"),
    game_id: int = typer.Argument(..., min=0, max=MAX_GAME_ID),
    account: str = typer.Option(..., "--account", "-a", help="Your account id"),
) -> None:
    """Use an ability on another player."""
    from hero_arena.cli.display import Display

    outcome = _run(_arena().use_ability, account, ability, target, game_id)
    Display().show_outcome(outcome)


@app.command()
def players(game_id: int = typer.Argument(..., min=0, max=MAX_GAME_ID)) -> None:
    """List the players still standing in a game."""
    from hero_arena.cli.display import Display

    roster = _run(_arena().list_game_players, game_id)
    Display().show_roster(game_id, roster)


@app.command()
def start(game_id: int = typer.Argument(..., min=0, max=MAX_GAME_ID)) -> None:
    """Mark a game as active."""
    from hero_arena.cli.display import Display

    _run(_arena().start, game_id)
    Display().show_info(f"Game {game_id} started.")


@app.command()
def stop(game_id: int = typer.Argument(..., min=0, max=MAX_GAME_ID)) -> None:
    """Mark a game as inactive."""
    from hero_arena.cli.display import Display

    _run(_arena().stop, game_id)
    Display().show_info(f"Game {game_id} stopped.")


@app.command()
def status(game_id: int = typer.Argument(..., min=0, max=MAX_GAME_ID)) -> None:
    """Show whether a game is active."""
    from hero_arena.cli.display import Display

    active = _run(_arena().is_active, game_id)
    Display().show_info(f"Game {game_id} is {'active' if active else 'inactive'}.")


@app.command()
def abilities() -> None:
    """List the ability names you can use."""
    from hero_arena.cli.display import Display

    Display().show_info(f"Abilities: {_run(_arena().list_abilities)}")


@app.command()
def version() -> None:
    """Print the log event format version."""
    typer.echo(_run(_arena().log_events_version))


if __name__ == "__main__":
    app()
