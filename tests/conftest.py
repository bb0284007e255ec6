import os

# Headless pygame for canvas tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from snake_world.canvas import Clear, MoveTo, Print, SetBackground, SetForeground


class RecordingCanvas:
    """Keeps every submitted frame and replays it onto a cell grid."""

    def __init__(self):
        self.frames = []

    def submit(self, commands):
        self.frames.append(list(commands))

    def cells(self):
        grid = {}
        cursor = (0, 0)
        fg = bg = None
        for frame in self.frames:
            for cmd in frame:
                if isinstance(cmd, Clear):
                    grid.clear()
                elif isinstance(cmd, MoveTo):
                    cursor = (cmd.x, cmd.y)
                elif isinstance(cmd, SetForeground):
                    fg = cmd.color
                elif isinstance(cmd, SetBackground):
                    bg = cmd.color
                elif isinstance(cmd, Print):
                    grid[cursor] = (cmd.glyph, fg, bg)
                    cursor = (cursor[0] + 1, cursor[1])
        return grid


class BrokenStream:
    def write(self, s):
        raise BrokenPipeError("output closed")

    def flush(self):
        pass


@pytest.fixture
def rng():
    return np.random.default_rng(1234)

@pytest.fixture
def canvas():
    return RecordingCanvas()

@pytest.fixture
def broken_stream():
    return BrokenStream()
