"""Terminal renderer that draws the arena as a grid of coloured cells."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from typing import TextIO

from wcwidth import wcwidth

from .ansi import ansi_print
from .game_object import GameObject
from .unit import (
    GAME_WINDOW_CELL_WIDTH,
    GAME_WINDOW_HEIGHT,
    GAME_WINDOW_WIDTH,
    WINDOW_PIXEL_WIDTH,
    Color,
)

_CLEAR_SCREEN = "\033[2J\033[H"
_CURSOR_HOME = "\033[H"
_BORDER = "+" + "-" * WINDOW_PIXEL_WIDTH + "+\n"


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies, never less than 1."""
    total = sum(max(0, wcwidth(ch)) for ch in text)
    return max(1, total)


def _terminal_size() -> tuple[int, int]:
    """Return ``(rows, columns)`` of the output terminal, or ``(-1, -1)``."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        return (-1, -1)
    return (size.lines, size.columns)


def _grid(value):
    return [[value] * GAME_WINDOW_WIDTH for _ in range(GAME_WINDOW_HEIGHT)]


def _copy(grid):
    return [row[:] for row in grid]


class View:
    """Keeps the frame being built and the frame last drawn, and redraws on change."""

    def __init__(
        self,
        out: TextIO | None = None,
        terminal_size: Callable[[], tuple[int, int]] | None = None,
    ) -> None:
        self._out = out
        self._terminal_size = terminal_size or _terminal_size
        self._term: tuple[int, int] | None = None
        self.latest_map: list[list[str]] = _grid("")
        self.latest_fg: list[list[Color]] = _grid(Color.NOCHANGE)
        self.latest_bg: list[list[Color]] = _grid(Color.NOCHANGE)
        self._last_map: list[list[str]] = _grid("")
        self._last_fg: list[list[Color]] = _grid(Color.NOCHANGE)
        self._last_bg: list[list[Color]] = _grid(Color.NOCHANGE)
        self.reset_latest()

    @property
    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def reset_latest(self) -> None:
        """Blank the frame being built."""
        self.latest_map = _grid(" ")
        self.latest_fg = _grid(Color.NOCHANGE)
        self.latest_bg = _grid(Color.NOCHANGE)

    def update_game_object(self, obj: GameObject) -> None:
        """Paint ``obj``'s icon into the frame being built, clipped to the arena."""
        pos = obj.position
        for dy, icon_row in enumerate(obj.icon):
            row = pos.y + dy
            if not 0 <= row < GAME_WINDOW_HEIGHT:
                continue
            for dx, cell in enumerate(icon_row):
                col = pos.x + dx
                if not 0 <= col < GAME_WINDOW_WIDTH:
                    continue
                self.latest_map[row][col] = cell.ascii
                self.latest_bg[row][col] = cell.color

    def _cell(self, text: str, fg: Color, bg: Color) -> str:
        pad_total = GAME_WINDOW_CELL_WIDTH - display_width(text)
        pad_left = pad_total // 2
        pad_right = pad_total - pad_left
        blank = ansi_print(" ", Color.NOCHANGE, bg, False, False)
        return (
            blank * max(0, pad_left)
            + ansi_print(text, fg, bg, False, False)
            + blank * max(0, pad_right)
        )

    def _frame(self) -> str:
        lines = [_BORDER]
        for texts, fgs, bgs in zip(self.latest_map, self.latest_fg, self.latest_bg):
            cells = "".join(self._cell(t, f, b) for t, f, b in zip(texts, fgs, bgs))
            lines.append("|" + cells + "|\n")
        lines.append(_BORDER)
        return "".join(lines)

    def render(self) -> str:
        """Draw the frame if it changed since the last draw; return what was drawn."""
        size = self._terminal_size()
        if size != self._term:
            self._stream.write(_CLEAR_SCREEN)
        self._term = size

        dirty = (
            self._last_map != self.latest_map
            or self._last_fg != self.latest_fg
            or self._last_bg != self.latest_bg
        )
        if not dirty:
            return ""

        frame = self._frame()
        self._stream.write(_CURSOR_HOME + frame)
        self._stream.flush()

        self._last_map = _copy(self.latest_map)
        self._last_fg = _copy(self.latest_fg)
        self._last_bg = _copy(self.latest_bg)
        return frame