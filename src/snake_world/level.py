# level.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple
import sys

import numpy as np  # type: ignore

from .canvas import Canvas, Command, FrameBuffer, MoveTo, Print, SetBackground, SetForeground
from .config import (
    BORDER_WIDTH, BORDER_HEIGHT, MAX_FOOD,
    BACKGROUND_GLYPH, BORDER_GLYPH,
    FG_COLOR, BG_COLOR, GRADIENT_STEP,
)
from .food import Food, FoodKind, Position

RGB = Tuple[int, int, int]

FOOD_KINDS = list(FoodKind)


class InvalidSpawnRegion(ValueError):
    """The spawn box left after insetting by the offset is empty."""


# ---------- Helpers ----------
def build_gradient(base: RGB, rows: int, step: int = GRADIENT_STEP) -> List[RGB]:
    """One background color per row; green grows by `step` per row, clipped at 255."""
    r, g, b = base
    greens = np.minimum(g + step * np.arange(rows, dtype=np.int64), 255)
    return [(r, int(gi), b) for gi in greens]

def _sample_range(rng: np.random.Generator, low: int, high: int, axis: str) -> int:
    if high <= low:
        raise InvalidSpawnRegion(f"Empty spawn range on {axis}: [{low}, {high})")
    return int(rng.integers(low, high))


# ---------- Level ----------
@dataclass
class Level:
    """
    Grid geometry, terrain styling and food spawning for one level.

    The playable interior is width x height (both forced odd), surrounded by
    a border of border_width columns and border_height rows on each side.
    """
    width: int
    height: int
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)
    background: str = BACKGROUND_GLYPH
    border: str = BORDER_GLYPH
    border_width: int = BORDER_WIDTH
    border_height: int = BORDER_HEIGHT
    fg_color: RGB = FG_COLOR
    bg_color: RGB = BG_COLOR
    bg_color_range: List[RGB] = field(default_factory=list)
    food_vec: List[Food] = field(default_factory=list)
    max_food: int = MAX_FOOD
    debug: bool = False

    def __post_init__(self):
        # Odd dimensions keep the interior symmetric around its center cell
        if self.width % 2 == 0:
            self.width += 1
        if self.height % 2 == 0:
            self.height += 1

    def total_width(self) -> int:
        return self.width + self.border_width * 2

    def total_height(self) -> int:
        return self.height + self.border_height * 2

    def is_border(self, x: int, y: int) -> bool:
        return (
            x < self.border_width
            or x > self.width + self.border_width - 1
            or y < self.border_height
            or y > self.height + self.border_height - 1
        )

    def _log(self, msg: str) -> None:
        if self.debug:
            print(f"[LEVEL] {msg}", file=sys.stderr)

    # Terrain -------------------------------------------------------------
    def generate(self, canvas: Canvas) -> None:
        """
        Paint the static terrain as a single frame:
        clear, then every cell row by row, border glyph on the margin and
        background glyph inside, shaded by the row's gradient color.
        Recomputes bg_color_range from scratch on every call.
        Canvas I/O errors propagate to the caller.
        """
        frame = FrameBuffer()
        frame.clear()

        self.bg_color_range = build_gradient(self.bg_color, self.total_height())

        for y in range(self.total_height()):
            for x in range(self.total_width()):
                frame.move_to(x, y)
                frame.set_foreground(self.fg_color)
                frame.set_background(self.bg_color_range[y])
                frame.print(self.border if self.is_border(x, y) else self.background)

        self._log(
            f"generated {self.total_width()}x{self.total_height()} "
            f"({len(frame)} commands)"
        )
        canvas.submit(frame.commands)

    # Food ----------------------------------------------------------------
    def rng_food(self) -> Food:
        """A food of uniformly random kind at a random interior position."""
        pos = self.rng_pos(None)
        kind = FOOD_KINDS[int(self.rng.integers(0, 2, endpoint=True))]
        food = Food(kind, pos)
        self._log(f"spawned {kind.name} at ({pos.x}, {pos.y})")
        return food

    def rng_pos(self, offset: Optional[int] = None) -> Position:
        """
        Uniform interior position, inset by `offset` cells on every side.
        Raises InvalidSpawnRegion when the inset leaves no cell to pick.
        """
        off = offset or 0
        if off < 0:
            raise InvalidSpawnRegion(f"Offset must be non-negative, got {off}")

        x = _sample_range(
            self.rng,
            self.border_width + off,
            self.width + self.border_width - off,
            "x",
        )
        y = _sample_range(
            self.rng,
            self.border_height + off,
            self.height + self.border_height - off,
            "y",
        )
        return Position(x, y)


def draw_food(level: Level, foods: Iterable[Food]) -> List[Command]:
    """Commands painting each food's glyph over its row's gradient color."""
    commands: List[Command] = []
    for food in foods:
        bg = level.bg_color_range[food.pos.y] if level.bg_color_range else level.bg_color
        commands += [
            MoveTo(food.pos.x, food.pos.y),
            SetForeground(food.color),
            SetBackground(bg),
            Print(food.symbol),
        ]
    return commands
