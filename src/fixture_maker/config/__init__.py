from .loader import ConfigError, load_config, parse_config
from .models import AppConfig, ChainedDecl, DonorDecl, FixtureDecl, IndexedDecl, LoggingConfig

__all__ = [
    "AppConfig",
    "ChainedDecl",
    "ConfigError",
    "DonorDecl",
    "FixtureDecl",
    "IndexedDecl",
    "LoggingConfig",
    "load_config",
    "parse_config",
]
