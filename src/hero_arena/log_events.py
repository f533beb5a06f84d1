"""Structured diagnostic events.

Every failure in the arena can be described by a severity, a short stable
code and, optionally, advice a human can act on. ``LogEvent`` bundles those
into a JSON document suitable for logs or for returning to a caller.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

LOG_EVENTS_VERSION = "0.0.1"


class LogLevel(str, Enum):
    INFO = "Info"
    WARN = "Warn"
    USER_ERROR = "UserError"
    NOT_FOUND = "NotFound"
    CONTRACT_ERROR = "ContractError"


class LogNeeds(BaseModel):
    """Non-human-readable prerequisites a caller should satisfy before retrying."""

    gas: Optional[int] = None
    deposit: Optional[int] = None
    height: Optional[int] = None
    epoch: Optional[int] = None
    block_timestamp: Optional[int] = None
    # Catch-all for conditions not covered above
    other: Optional[str] = None


class LogEvent(BaseModel):
    level: LogLevel
    code: str = Field(pattern=r"^[A-Z][A-Z0-9_]*$")
    advice: Optional[str] = None
    needs: Optional[LogNeeds] = None

    def with_advice(self, advice: str) -> LogEvent:
        """Set the human-readable advice. Returns self so calls can be chained."""
        self.advice = advice
        return self

    def with_needs(self, needs: LogNeeds) -> LogEvent:
        """Set the retry prerequisites. Returns self so calls can be chained."""
        self.needs = needs
        return self

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


def log_events_version() -> str:
    """Version of the event format produced by ``LogEvent.to_json``."""
    return LOG_EVENTS_VERSION
