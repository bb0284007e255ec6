# canvas.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol, TextIO, Tuple, Union
import sys

import pygame  # type: ignore

from .config import BLACK, CELL_SIZE

RGB = Tuple[int, int, int]

# -----------------------------------------------------------------------------
# Draw commands
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Clear:
    pass

@dataclass(frozen=True)
class MoveTo:
    x: int
    y: int

@dataclass(frozen=True)
class SetForeground:
    color: RGB

@dataclass(frozen=True)
class SetBackground:
    color: RGB

@dataclass(frozen=True)
class Print:
    glyph: str

Command = Union[Clear, MoveTo, SetForeground, SetBackground, Print]


@dataclass
class FrameBuffer:
    """Ordered list of draw commands, submitted to a canvas as one frame."""
    commands: List[Command] = field(default_factory=list)

    def clear(self) -> None:
        self.commands.append(Clear())

    def move_to(self, x: int, y: int) -> None:
        self.commands.append(MoveTo(x, y))

    def set_foreground(self, color: RGB) -> None:
        self.commands.append(SetForeground(color))

    def set_background(self, color: RGB) -> None:
        self.commands.append(SetBackground(color))

    def print(self, glyph: str) -> None:
        self.commands.append(Print(glyph))

    def extend(self, commands: Iterable[Command]) -> None:
        self.commands.extend(commands)

    def __len__(self) -> int:
        return len(self.commands)


class Canvas(Protocol):
    def submit(self, commands: Iterable[Command]) -> None:
        ...


# -----------------------------------------------------------------------------
# ANSI terminal
# -----------------------------------------------------------------------------
ESC = "\x1b["

def ansi_for(cmd: Command) -> str:
    """Translate one command to its escape sequence (cursor is 1-based)."""
    if isinstance(cmd, Clear):
        return f"{ESC}2J"
    if isinstance(cmd, MoveTo):
        return f"{ESC}{cmd.y + 1};{cmd.x + 1}H"
    if isinstance(cmd, SetForeground):
        r, g, b = cmd.color
        return f"{ESC}38;2;{r};{g};{b}m"
    if isinstance(cmd, SetBackground):
        r, g, b = cmd.color
        return f"{ESC}48;2;{r};{g};{b}m"
    if isinstance(cmd, Print):
        return cmd.glyph
    raise ValueError(f"Unknown draw command: {cmd!r}")


class TerminalCanvas:
    """
    Writes each submitted frame to the stream as a single string,
    so the terminal never shows a half-drawn frame.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def submit(self, commands: Iterable[Command]) -> None:
        frame = "".join(ansi_for(c) for c in commands)
        self.stream.write(frame)
        self.stream.flush()

    def close(self, rows: int = 0) -> None:
        """Reset colors and park the cursor below the drawn area."""
        self.stream.write(f"{ESC}0m{ESC}{rows + 1};1H\n")
        self.stream.flush()


# -----------------------------------------------------------------------------
# Pygame window
# -----------------------------------------------------------------------------
class PygameCanvas:
    """
    Grid canvas backed by a pygame surface: one cell_size square per glyph.
    Without a surface it opens (and flips) its own display window.
    """

    def __init__(self, cols: int, rows: int, cell_size: int = CELL_SIZE,
                 surface: Optional[pygame.Surface] = None):
        self.cols = cols
        self.rows = rows
        self.cell_size = cell_size
        self._owns_display = surface is None

        pygame.font.init()
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode((cols * cell_size, rows * cell_size))
            pygame.display.set_caption("Snake World")
        self.surface = surface
        self.font = pygame.font.SysFont(None, cell_size)

        # Pen state, carried across submits like a terminal's
        self.cursor = (0, 0)
        self.fg: RGB = (255, 255, 255)
        self.bg: RGB = BLACK

    def _draw_glyph(self, glyph: str) -> None:
        cx, cy = self.cursor
        rect = pygame.Rect(cx * self.cell_size, cy * self.cell_size,
                           self.cell_size, self.cell_size)
        pygame.draw.rect(self.surface, self.bg, rect)
        if glyph.strip():
            txt = self.font.render(glyph, True, self.fg)
            self.surface.blit(txt, txt.get_rect(center=rect.center))
        # Printing advances the cursor one cell, as in a terminal
        self.cursor = (cx + 1, cy)

    def submit(self, commands: Iterable[Command]) -> None:
        for cmd in commands:
            if isinstance(cmd, Clear):
                self.surface.fill(BLACK)
            elif isinstance(cmd, MoveTo):
                self.cursor = (cmd.x, cmd.y)
            elif isinstance(cmd, SetForeground):
                self.fg = cmd.color
            elif isinstance(cmd, SetBackground):
                self.bg = cmd.color
            elif isinstance(cmd, Print):
                self._draw_glyph(cmd.glyph)
            else:
                raise ValueError(f"Unknown draw command: {cmd!r}")

        if self._owns_display:
            pygame.display.flip()

    def close(self) -> None:
        if self._owns_display:
            pygame.quit()
