# food.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Position:
    x: int
    y: int


class FoodKind(Enum):
    """
    Every kind declares (meals, symbol, color) on the member itself,
    so a new kind cannot exist without all three.
    """
    CHERRY = (1, "\U0001F352", (255, 0, 0))
    MOUSE = (2, "\U0001F401", (50, 60, 70))
    BOMB = (-10, "\U0001F4A3", (0, 0, 0))

    def __init__(self, meals: int, symbol: str, color: RGB):
        self.meals = meals
        self.symbol = symbol
        self.color = color


@dataclass(frozen=True)
class Food:
    kind: FoodKind
    pos: Position

    @property
    def meals(self) -> int:
        """Length change applied to the snake when eaten (negative shrinks)."""
        return self.kind.meals

    @property
    def symbol(self) -> str:
        return self.kind.symbol

    @property
    def color(self) -> RGB:
        return self.kind.color
