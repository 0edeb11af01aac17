from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from fixture_maker.donors.computed import ChainedSequence, IndexedSequence
from fixture_maker.donors.constant import ConstantDonor
from fixture_maker.donors.maker_donor import MakerDonor, SameValueDonor
from fixture_maker.donors.sequences import FixedSequence, RepeatingSequence
from fixture_maker.ports.donor import Buildable

T = TypeVar("T")

# Factories validate synchronously and return ready-to-pull donors.
# The *values / *_from split keeps a single iterable argument unambiguous.


def constant(value: T) -> ConstantDonor[T]:
    return ConstantDonor(value)


def sequence(*values: T) -> FixedSequence[T]:
    return FixedSequence(values)


def sequence_from(values: Iterable[T]) -> FixedSequence[T]:
    return FixedSequence(values)


def repeating_sequence(*values: T) -> RepeatingSequence[T]:
    return RepeatingSequence(values)


def repeating_sequence_from(values: Iterable[T]) -> RepeatingSequence[T]:
    return RepeatingSequence(values)


def indexed_sequence(value_at: Callable[[int], T]) -> IndexedSequence[T]:
    _require_callable(value_at, "value_at")
    return IndexedSequence(value_at)


def chained_sequence(first_value: Callable[[], T], value_after: Callable[[T], T]) -> ChainedSequence[T]:
    _require_callable(first_value, "first_value")
    _require_callable(value_after, "value_after")
    return ChainedSequence(first_value, value_after)


def builder_as_donor(builder: Buildable[T]) -> MakerDonor[T]:
    _require_buildable(builder)
    return MakerDonor(builder)


def the_same(builder: Buildable[T]) -> SameValueDonor[T]:
    _require_buildable(builder)
    return SameValueDonor(builder)


def _require_callable(fn: object, name: str) -> None:
    if not callable(fn):
        raise TypeError(f"{name} must be callable, got {type(fn).__name__}")


def _require_buildable(builder: object) -> None:
    if not isinstance(builder, Buildable):
        raise TypeError(f"builder must provide make(), got {type(builder).__name__}")
