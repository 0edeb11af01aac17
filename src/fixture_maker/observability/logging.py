"""Structured log events for fixture runs.

Only the CLI logs. Donors and makers raise and leave reporting to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Literal

LogLevel = Literal["info", "error"]


class FixtureEvent(str, Enum):
    RENDERED = "fixture.rendered"
    FAILED = "fixture.failed"


@dataclass(frozen=True, slots=True)
class LogMessage:
    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.level not in ("info", "error"):
            raise ValueError(f"Unsupported log level: {self.level!r}")
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")


def fixture_rendered(*, fixture: str, made: int) -> LogMessage:
    return LogMessage(
        level="info",
        message=FixtureEvent.RENDERED.value,
        fields={"fixture": fixture, "made": made},
    )


def fixture_failed(*, fixture: str, made: int, error: BaseException) -> LogMessage:
    # `made` counts instances written before the failing build.
    return LogMessage(
        level="error",
        message=FixtureEvent.FAILED.value,
        fields={
            "fixture": fixture,
            "made": made,
            "error_type": type(error).__name__,
            "error": str(error),
        },
    )
