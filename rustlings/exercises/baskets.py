"""Solutions to the exercises on filling fruit baskets."""

from __future__ import annotations

import enum


class Fruit(enum.Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def make_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five pieces of fruit."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)