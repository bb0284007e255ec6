# src/snake_world/__init__.py
"""Terrain generation and food spawning for a terminal snake game."""

from .food import Food, FoodKind, Position
from .level import InvalidSpawnRegion, Level, build_gradient, draw_food

__all__ = [
    "Food", "FoodKind", "Position",
    "InvalidSpawnRegion", "Level", "build_gradient", "draw_food",
]
