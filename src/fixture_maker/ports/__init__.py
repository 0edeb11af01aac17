from .donor import Buildable, Donor
from .fixture_sink import FixtureSink
from .log_sink import LogSink

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "Buildable",
    "Donor",
    "FixtureSink",
    "LogSink",
]
