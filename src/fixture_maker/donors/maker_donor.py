from __future__ import annotations

from typing import Generic, TypeVar

from fixture_maker.ports.donor import Buildable, Donor

T = TypeVar("T")


class MakerDonor(Donor[T], Generic[T]):
    # The builder is shared, not owned: several donors may wrap the same one.
    def __init__(self, builder: Buildable[T]) -> None:
        self._builder = builder

    @property
    def builder(self) -> Buildable[T]:
        return self._builder

    def next_value(self) -> T:
        # Each pull is a full build; failures from nested donors propagate unchanged.
        return self._builder.make()

    def __repr__(self) -> str:
        return f"MakerDonor(builder={self._builder!r})"


class SameValueDonor(Donor[T], Generic[T]):
    # Builds lazily on first pull, then keeps handing out that one instance.
    def __init__(self, builder: Buildable[T]) -> None:
        self._builder = builder
        self._built = False
        self._instance: T | None = None

    def next_value(self) -> T:
        if not self._built:
            self._instance = self._builder.make()
            self._built = True
        return self._instance  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"SameValueDonor(builder={self._builder!r}, built={self._built})"
