from __future__ import annotations

from hero_arena.log_events import LogEvent, LogLevel


class ArenaError(Exception):
    """Base exception for the arena. Carries the severity, code and advice of the failure."""

    level: LogLevel = LogLevel.CONTRACT_ERROR
    code: str = "ARENA_ERROR"

    def __init__(self, message: str, advice: str | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.advice = advice
        if code is not None:
            self.code = code

    def to_event(self) -> LogEvent:
        event = LogEvent(level=self.level, code=self.code)
        if self.advice:
            event.with_advice(self.advice)
        return event


class UserError(ArenaError):
    """Raised for failures the caller can correct."""

    level = LogLevel.USER_ERROR


class NotFound(ArenaError):
    level = LogLevel.NOT_FOUND


class ContractError(ArenaError):
    """Raised when an internal invariant does not hold."""

    level = LogLevel.CONTRACT_ERROR
    code = "CONTRACT_ERROR"


class UnknownAbility(UserError):
    code = "NO_ABILITY"


class AbilityNotAvailable(UserError):
    code = "ABILITY_NOT_AVAILABLE"


class NotRegistered(UserError):
    code = "NOT_REGISTERED"


class TargetNotRegistered(UserError):
    code = "TARGET_NOT_REGISTERED"


class NameTooLong(UserError):
    code = "NAME_TOO_LONG"


class InvalidTarget(UserError):
    code = "INVALID_TARGET"


class GameNotFound(NotFound):
    code = "NO_GAME"


class InvalidGameId(UserError):
    code = "INVALID_GAME_ID"
