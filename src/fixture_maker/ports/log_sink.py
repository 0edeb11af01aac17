from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fixture_maker.observability.logging import LogMessage


# LogSink is a port for structured log adapters.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Consume one structured log message."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Close the sink and release resources."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
