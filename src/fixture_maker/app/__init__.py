from .cli import apply_logging_overrides, build_parser, main, parse_args, run

__all__ = ["apply_logging_overrides", "build_parser", "main", "parse_args", "run"]
