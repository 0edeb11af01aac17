from __future__ import annotations

from collections.abc import Sequence

from fixture_maker.maker import like, make, with_
from fruit_bowl.domain import Apple, Banana
from fruit_bowl.makers import a_banana, an_apple, leaves, ripeness


def build_examples() -> tuple[Apple, Apple, Banana]:
    # An unripe apple is derived from the ripe one and overrides only ripeness.
    ripe_apple = an_apple(with_(leaves, 2), with_(ripeness, 0.9))
    unripe_apple = an_apple(like(ripe_apple), with_(ripeness, 0.125))
    return make(ripe_apple), make(unripe_apple), make(a_banana())


def main(argv: Sequence[str] | None = None) -> int:
    _ = argv
    for fruit in build_examples():
        print(repr(fruit))
    return 0
