from __future__ import annotations

import json
from pathlib import Path

from fixture_maker.config.models import LoggingConfig
from fixture_maker.observability.logging import LogMessage
from fixture_maker.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Minimal structured log sink: one JSON object per line on stdout.
    def emit(self, message: LogMessage) -> None:
        print(json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str))

    def close(self) -> None:
        return None


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends so repeated runs share one log.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def build_log_sink(config: LoggingConfig) -> LogSink | None:
    # "none" disables logging entirely; callers skip emission on None.
    if config.sink == "none":
        return None
    if config.sink == "stdout":
        return StdoutLogSink()
    if not config.path:
        raise ValueError("logging.path must be a non-empty string for the jsonl sink")
    return JsonlLogSink(Path(config.path))


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
