from .domain import Apple, Banana, Fruit
from .makers import a_banana, an_apple, curve, leaves, ripeness

__all__ = ["Apple", "Banana", "Fruit", "a_banana", "an_apple", "curve", "leaves", "ripeness"]
