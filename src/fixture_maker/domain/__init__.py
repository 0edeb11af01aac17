from .errors import ExhaustedSequenceError, InvalidSequenceError, UnknownPropertyError

# Public domain exports keep imports explicit across layers.
__all__ = [
    "ExhaustedSequenceError",
    "InvalidSequenceError",
    "UnknownPropertyError",
]
