from __future__ import annotations

from fixture_maker.maker import Maker, Property, PropertyLookup, PropertyProvider
from fruit_bowl.domain import Apple, Banana, Fruit

# Shared by every fruit maker; leaves/curve are specific to one fruit.
ripeness: Property[Fruit, float] = Property("ripeness")
leaves: Property[Apple, int] = Property("leaves")
curve: Property[Banana, float] = Property("curve")


def _apple(lookup: PropertyLookup) -> Apple:
    return Apple(leaves=lookup.value_of(leaves, 2), ripeness=lookup.value_of(ripeness, 0.0))


def _banana(lookup: PropertyLookup) -> Banana:
    return Banana(curve=lookup.value_of(curve, 0.5), ripeness=lookup.value_of(ripeness, 0.0))


def an_apple(*providers: PropertyProvider) -> Maker[Apple]:
    return Maker(_apple, *providers)


def a_banana(*providers: PropertyProvider) -> Maker[Banana]:
    return Maker(_banana, *providers)
