from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


# Donor is the single pull operation builders use to fill one property per instance.
@runtime_checkable
class Donor(Protocol[T_co]):
    def next_value(self) -> T_co:
        """Return the next value, advancing any internal cursor."""
        raise NotImplementedError("Donor is a port; use a concrete donor.")


# Buildable is anything MakerDonor can wrap: one full build per call.
@runtime_checkable
class Buildable(Protocol[T_co]):
    def make(self) -> T_co:
        """Build and return a new instance."""
        raise NotImplementedError("Buildable is a port; use a concrete maker.")
