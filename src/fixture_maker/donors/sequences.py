"""Data-backed sequence donors.

Both donors copy their source into a tuple at construction, so mutating the
caller's list afterwards has no effect. The cursor belongs to the donor
instance; two donors over the same source advance independently.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from fixture_maker.domain.errors import ExhaustedSequenceError, InvalidSequenceError
from fixture_maker.ports.donor import Donor

T = TypeVar("T")


def _snapshot(values: Iterable[T], kind: str) -> tuple[T, ...]:
    snapshot = tuple(values)
    if not snapshot:
        raise InvalidSequenceError(f"{kind} requires at least one value")
    return snapshot


class FixedSequence(Donor[T]):
    """Hands out each value once, in order, then fails on every further pull."""

    def __init__(self, values: Iterable[T]) -> None:
        self._values = _snapshot(values, "FixedSequence")
        self._cursor = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._cursor

    def next_value(self) -> T:
        if self._cursor >= len(self._values):
            raise ExhaustedSequenceError(len(self._values))
        value = self._values[self._cursor]
        self._cursor += 1
        return value

    def __repr__(self) -> str:
        return f"FixedSequence(values={self._values!r}, cursor={self._cursor})"


class RepeatingSequence(Donor[T]):
    """Cycles through its values indefinitely."""

    def __init__(self, values: Iterable[T]) -> None:
        self._values = _snapshot(values, "RepeatingSequence")
        self._cursor = 0

    def next_value(self) -> T:
        value = self._values[self._cursor % len(self._values)]
        self._cursor += 1
        return value

    def __repr__(self) -> str:
        return f"RepeatingSequence(values={self._values!r}, cursor={self._cursor})"
