from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fixture_maker.domain.errors import UnknownPropertyError
from fixture_maker.ports.donor import Donor

T = TypeVar("T")
V = TypeVar("V")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# Properties are identity-keyed: two Property("name") tokens are distinct keys.
@dataclass(frozen=True, eq=False)
class Property(Generic[T, V]):
    name: str

    def __repr__(self) -> str:
        return f"Property({self.name!r})"


class PropertyLookup:
    """Read-only view an instantiator uses to pull configured property values.

    Every ``value_of`` call pulls the configured donor once, so an instantiator
    should ask for each property at most once per instance.
    """

    def __init__(self, donors: Mapping[Property[Any, Any], Donor[Any]]) -> None:
        self._donors = donors

    def value_of(self, prop: Property[Any, V], default: V | Donor[V] = MISSING) -> V:
        """Pull the donor configured for ``prop``, falling back to ``default``.

        The default is matched structurally: any object with a ``next_value``
        method counts as a donor and is pulled. To hand such an object out
        unchanged, wrap it in ``constant(...)``.
        """
        donor = self._donors.get(prop)
        if donor is not None:
            return donor.next_value()
        if default is MISSING:
            raise UnknownPropertyError(prop.name)
        if isinstance(default, Donor):
            return default.next_value()
        return default

    def has(self, prop: Property[Any, Any]) -> bool:
        return prop in self._donors
