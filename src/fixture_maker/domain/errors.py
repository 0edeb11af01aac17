from __future__ import annotations


class ExhaustedSequenceError(RuntimeError):
    # Terminal: a fixed sequence never wraps or falls back to a default.
    def __init__(self, length: int) -> None:
        super().__init__(f"Sequence of {length} value(s) is exhausted")
        self.length = length


class InvalidSequenceError(ValueError):
    # Raised at construction for structurally invalid sources.
    pass


class UnknownPropertyError(KeyError):
    def __init__(self, property_name: str) -> None:
        super().__init__(property_name)
        self.property_name = property_name

    def __str__(self) -> str:
        return f"No value configured for property '{self.property_name}' and no default given"
