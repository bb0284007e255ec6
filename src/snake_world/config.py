# config.py
from dataclasses import dataclass
from typing import Optional

# ----- Grid -----
DEFAULT_WIDTH, DEFAULT_HEIGHT = 41, 21
BORDER_WIDTH, BORDER_HEIGHT = 2, 1
MAX_FOOD = 4

# ----- Glyphs -----
BACKGROUND_GLYPH = " "
BORDER_GLYPH = "█"

# ----- Colors -----
FG_COLOR = (10, 100, 120)
BG_COLOR = (230, 40, 130)
BLACK = (0, 0, 0)

# Green added to the background per terminal row (saturates at 255)
GRADIENT_STEP = 10

# ----- Pygame backend -----
CELL_SIZE = 20

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    foods: int = MAX_FOOD
    frame_delay_ms: int = 100
    backend: str = "terminal"
    debug: bool = False

CFG = Config()
