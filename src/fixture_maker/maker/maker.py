from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fixture_maker.donors.constant import ConstantDonor
from fixture_maker.donors.maker_donor import MakerDonor
from fixture_maker.maker.property import Property, PropertyLookup
from fixture_maker.ports.donor import Donor

T = TypeVar("T")
V = TypeVar("V")

Instantiator = Callable[[PropertyLookup], T]
DonorMap = dict[Property[Any, Any], Donor[Any]]


@dataclass(frozen=True)
class PropertyValue(Generic[V]):
    # One with_() clause: a property bound to the donor that fills it.
    prop: Property[Any, V]
    donor: Donor[V]

    def apply(self, donors: DonorMap) -> None:
        donors[self.prop] = self.donor


@dataclass(frozen=True)
class LikeProvider:
    # like() clause: copies another maker's donor instances (sequences stay shared).
    source: Maker[Any]

    def apply(self, donors: DonorMap) -> None:
        donors.update(self.source.donors)


PropertyProvider = PropertyValue[Any] | LikeProvider


class Maker(Generic[T]):
    """Immutable builder: an instantiator plus the donors for its properties.

    Derived makers (``but``/``like``) reuse the same donor instances rather than
    copying them, so a sequence configured once keeps advancing across every
    maker derived from it.
    """

    def __init__(self, instantiator: Instantiator[T], *providers: PropertyProvider) -> None:
        self._instantiator = instantiator
        donors: DonorMap = {}
        for provider in providers:
            provider.apply(donors)
        self._donors = donors

    @property
    def donors(self) -> dict[Property[Any, Any], Donor[Any]]:
        return dict(self._donors)

    def make(self) -> T:
        return self._instantiator(PropertyLookup(self._donors))

    def next_value(self) -> T:
        return self.make()

    def but(self, *providers: PropertyProvider) -> Maker[T]:
        return Maker(self._instantiator, LikeProvider(self), *providers)

    def __repr__(self) -> str:
        names = ", ".join(prop.name for prop in self._donors)
        return f"Maker({getattr(self._instantiator, '__name__', self._instantiator)!r}, properties=[{names}])"


def with_(prop: Property[Any, V], value: V | Donor[V] | Maker[V]) -> PropertyValue[V]:
    if isinstance(value, Maker):
        return PropertyValue(prop, MakerDonor(value))
    if isinstance(value, Donor):
        return PropertyValue(prop, value)
    return PropertyValue(prop, ConstantDonor(value))


def like(maker: Maker[Any]) -> LikeProvider:
    return LikeProvider(maker)


def a(instantiator: Instantiator[T], *providers: PropertyProvider) -> Maker[T]:
    return Maker(instantiator, *providers)


an = a


def make(maker: Maker[T]) -> T:
    return maker.make()


def make_many(maker: Maker[T], count: int) -> list[T]:
    if count < 0:
        raise ValueError("count must be non-negative")
    return [maker.make() for _ in range(count)]


def list_of(*donors: Donor[V]) -> list[V]:
    return [donor.next_value() for donor in donors]


def values_of(donor: Donor[V], count: int) -> Iterable[V]:
    # Lazily pulls count values; exhaustion surfaces at the failing pull.
    for _ in range(count):
        yield donor.next_value()
