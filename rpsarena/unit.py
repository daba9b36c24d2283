"""Basic value types and arena dimensions shared across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GAME_WINDOW_WIDTH = 20
GAME_WINDOW_HEIGHT = 20

GAME_WINDOW_CELL_WIDTH = 2
WINDOW_PIXEL_WIDTH = GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH
WINDOW_PIXEL_HEIGHT = GAME_WINDOW_HEIGHT

SPF = 1.0  # seconds per frame


@dataclass(frozen=True)
class Vec2:
    """An integer 2-D vector, used both as a position and as a size."""

    x: int
    y: int

    @property
    def width(self) -> int:
        return self.x

    @property
    def height(self) -> int:
        return self.y

    def moved(self, dx: int, dy: int) -> Vec2:
        """Return a copy shifted by ``(dx, dy)``."""
        return Vec2(self.x + dx, self.y + dy)


Position = Vec2


class Color(IntEnum):
    """Terminal colours; ``NOCHANGE`` leaves the current colour alone."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PINK = 5
    CYAN = 6
    WHITE = 7
    NOCHANGE = 8


class Direction(IntEnum):
    """Heading of a moving object."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3