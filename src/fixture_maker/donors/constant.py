from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from fixture_maker.ports.donor import Donor

T = TypeVar("T")


@dataclass(frozen=True)
class ConstantDonor(Donor[T], Generic[T]):
    # Stateless: every pull hands out the same stored value.
    value: T

    def next_value(self) -> T:
        return self.value
