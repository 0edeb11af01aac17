from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Fruit:
    ripeness: float = field(default=0.0, kw_only=True)

    def is_ripe(self) -> bool:
        return self.ripeness >= 0.9


@dataclass
class Apple(Fruit):
    leaves: int


@dataclass
class Banana(Fruit):
    curve: float
