from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from fixture_maker.adapters.fixture_sink import build_fixture_sink
from fixture_maker.config.fixtures import build_fixture_makers
from fixture_maker.config.loader import ConfigError, load_config
from fixture_maker.config.models import AppConfig
from fixture_maker.observability.logging import LogMessage, fixture_failed, fixture_rendered
from fixture_maker.observability.sinks import build_log_sink
from fixture_maker.ports.log_sink import LogSink

# The CLI is a thin wrapper: config loading, donor wiring and output live elsewhere.


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render test fixtures declared in a YAML file")
    parser.add_argument("--config", required=True, help="Path to YAML fixture file")
    parser.add_argument("--fixture", required=True, help="Name of the fixture to render")
    parser.add_argument("--count", type=int, default=1, help="Number of instances to make")
    parser.add_argument("--output", help="Output JSONL path (default: stdout)")
    parser.add_argument(
        "--log-sink",
        choices=["stdout", "jsonl", "none"],
        help="Override logging sink",
    )
    parser.add_argument("--log-path", help="Override JSONL log file path")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_logging_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config.
    if args.log_sink is not None:
        config.logging.sink = args.log_sink
    if args.log_path is not None:
        config.logging.path = args.log_path
        if args.log_sink is None:
            config.logging.sink = "jsonl"


def run(argv: Sequence[str] | None = None) -> int:
    # Build failures (e.g. an exhausted sequence) are logged, then propagate unchanged.
    args = parse_args(argv)
    if args.count < 0:
        raise ConfigError("--count must be non-negative")
    config = load_config(Path(args.config))
    apply_logging_overrides(config, args)

    makers = build_fixture_makers(config)
    if args.fixture not in makers:
        raise ConfigError(f"Unknown fixture: '{args.fixture}'")

    maker = makers[args.fixture]
    log_sink = build_log_sink(config.logging)
    output = build_fixture_sink(args.output)
    made = 0
    try:
        for _ in range(args.count):
            output.write(maker.make())
            made += 1
    except Exception as exc:
        _emit(log_sink, fixture_failed(fixture=args.fixture, made=made, error=exc))
        raise
    else:
        _emit(log_sink, fixture_rendered(fixture=args.fixture, made=made))
    finally:
        output.close()
        if log_sink is not None:
            log_sink.close()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    return run(list(argv) if argv is not None else None)


def _emit(sink: LogSink | None, message: LogMessage) -> None:
    if sink is not None:
        sink.emit(message)
