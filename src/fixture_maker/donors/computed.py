"""Rule-computed sequence donors.

The rules are plain callables. If a rule raises, the error reaches the caller
unchanged and the donor keeps its previous state, so the next pull retries
the same step.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from fixture_maker.ports.donor import Donor

T = TypeVar("T")


class IndexedSequence(Donor[T], Generic[T]):
    def __init__(self, value_at: Callable[[int], T]) -> None:
        self._value_at = value_at
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def next_value(self) -> T:
        value = self._value_at(self._index)
        self._index += 1
        return value

    def __repr__(self) -> str:
        return f"IndexedSequence(value_at={self._value_at!r}, index={self._index})"


class ChainedSequence(Donor[T], Generic[T]):
    def __init__(self, first_value: Callable[[], T], value_after: Callable[[T], T]) -> None:
        self._first_value = first_value
        self._value_after = value_after
        self._has_produced = False
        self._last_value: T | None = None

    def next_value(self) -> T:
        if not self._has_produced:
            value = self._first_value()
            self._has_produced = True
        else:
            value = self._value_after(self._last_value)  # type: ignore[arg-type]
        self._last_value = value
        return value

    def __repr__(self) -> str:
        return f"ChainedSequence(has_produced={self._has_produced}, last_value={self._last_value!r})"
