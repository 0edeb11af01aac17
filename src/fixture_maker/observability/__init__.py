from .logging import FixtureEvent, LogMessage, fixture_failed, fixture_rendered
from .sinks import JsonlLogSink, StdoutLogSink, build_log_sink

__all__ = [
    "FixtureEvent",
    "JsonlLogSink",
    "LogMessage",
    "StdoutLogSink",
    "build_log_sink",
    "fixture_failed",
    "fixture_rendered",
]
