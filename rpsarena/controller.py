"""Keyboard-driven rock-paper-scissors game loop on a bounded arena."""

from __future__ import annotations

import os
import random
import sys
import termios
import time
from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import TextIO

from .game_object import GameObject, create_paper, create_rock, create_scissors
from .unit import GAME_WINDOW_HEIGHT, GAME_WINDOW_WIDTH, SPF, Position
from .view import View

_ESC = "\x1b"
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_KEY_STEPS = {
    "w": (0, -1),
    "W": (0, -1),
    "s": (0, 1),
    "S": (0, 1),
    "a": (-1, 0),
    "A": (-1, 0),
    "d": (1, 0),
    "D": (1, 0),
}
_MAKERS: dict[str, Callable[[int, int], GameObject]] = {
    "RR": create_rock,
    "PP": create_paper,
    "SS": create_scissors,
}
_VICTORIES = {("RR", "SS"), ("PP", "RR"), ("SS", "PP")}

WIN_MESSAGE = "You win!"
LOSE_MESSAGE = "You lose!"


class GameOver(Exception):
    """Raised when the game has been decided."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def can_defeat(me: str, other: str) -> bool:
    """True when the object labelled ``me`` beats the one labelled ``other``."""
    return (me, other) in _VICTORIES


def _in_bounds(pos: Position) -> bool:
    return 0 <= pos.x < GAME_WINDOW_WIDTH and 0 <= pos.y < GAME_WINDOW_HEIGHT


def _default_objects() -> list[GameObject]:
    return [
        create_rock(5, 5),
        create_rock(7, 5),
        create_rock(2, 13),
        create_rock(6, 5),
        create_paper(5, 3),
        create_paper(12, 6),
        create_paper(16, 2),
        create_scissors(6, 15),
        create_scissors(1, 5),
        create_scissors(3, 8),
    ]


@contextmanager
def raw_terminal() -> Iterator[None]:
    """Switch stdin to non-blocking, unechoed input and hide the cursor."""
    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd) if os.isatty(fd) else None
    if saved is not None:
        attrs = termios.tcgetattr(fd)
        attrs[3] &= ~(termios.ICANON | termios.ECHO)
        attrs[6][termios.VMIN] = 0
        attrs[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    sys.stdout.write("\x1b[?25l")
    try:
        yield
    finally:
        sys.stdout.write("\x1b[m\x1b[?25h")
        sys.stdout.flush()
        if saved is not None:
            termios.tcsetattr(fd, termios.TCSANOW, saved)


def read_input() -> str | None:
    """Return the last key waiting on stdin, or None when nothing was typed."""
    sys.stdout.flush()
    data = os.read(sys.stdin.fileno(), 4096)
    return chr(data[-1]) if data else None


class Controller:
    """Owns the arena's objects, reacts to keys and moves the other pieces."""

    def __init__(
        self,
        view: View,
        objects: Iterable[GameObject] | None = None,
        rng: random.Random | None = None,
        out: TextIO | None = None,
        read_key: Callable[[], str | None] | None = None,
        terminal: Callable[[], AbstractContextManager] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.view = view
        self.objects: list[GameObject] = (
            list(objects) if objects is not None else _default_objects()
        )
        if not self.objects:
            raise ValueError("the arena needs at least one object")
        self.player = self.objects[0]
        self.current_index = 0
        self._rng = rng or random.Random()
        self._out = out
        self._read_key = read_key or read_input
        self._terminal = terminal or raw_terminal
        self._sleep = sleep or time.sleep

    @property
    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def run(self) -> str | None:
        """Play until ESC is pressed or the game is decided; return the outcome."""
        with self._terminal():
            try:
                self.update()
                while True:
                    start = time.perf_counter()
                    key = self._read_key()
                    if key == _ESC:
                        break
                    self.handle_input(key)
                    self.update()
                    self._draw()
                    delay = SPF - (time.perf_counter() - start)
                    if delay > 0:
                        self._sleep(delay)
            except GameOver as over:
                self._stream.write(over.message + "\n")
                return over.message
        return None

    def _draw(self) -> None:
        self.view.reset_latest()
        for obj in self.objects:
            obj.update()
            self.view.update_game_object(obj)
        self.view.render()

    def _finish(self, message: str) -> None:
        self._draw()
        self.print_status()
        raise GameOver(message)

    def _counts(self) -> Counter:
        return Counter(obj.kind() for obj in self.objects)

    def print_status(self) -> None:
        """Write how many of each kind are on the arena."""
        counts = self._counts()
        self._stream.write(
            f"[Status] RR: {counts['RR']}, PP: {counts['PP']}, SS: {counts['SS']}\n"
        )

    def object_at(self, pos: Position) -> GameObject | None:
        """The first object at ``pos``, or None."""
        return next((obj for obj in self.objects if obj.position == pos), None)

    def _index_of(self, target: GameObject) -> int | None:
        return next(
            (i for i, obj in enumerate(self.objects) if obj is target), None
        )

    def _switch_to_next_rr(self) -> None:
        count = len(self.objects)
        for step in range(count):
            idx = (self.current_index + step) % count
            if self.objects[idx].kind() == "RR":
                self.current_index = idx
                self.player = self.objects[idx]
                return
        self._finish(LOSE_MESSAGE)

    def _switch_control(self) -> None:
        count = len(self.objects)
        for step in range(1, count):
            idx = (self.current_index + step) % count
            if self.objects[idx].kind() == "RR":
                self.current_index = idx
                self.player = self.objects[idx]
                break

    def handle_input(self, key: str | None) -> None:
        """Apply one key press: move the player, switch control, or nothing.

        Raises GameOver when the move decides the game.
        """
        if key is None:
            return
        if key in ("c", "C"):
            self._stream.write("[DEBUG] Enter switch-RR logic\n")
            self._switch_control()
            return

        step = _KEY_STEPS.get(key)
        if step is None:
            return
        old_pos = self.player.position
        new_pos = old_pos.moved(*step)
        if not _in_bounds(new_pos):
            return
        self.player.position = new_pos

        me = self.player.kind()
        for dx, dy in _STEPS:
            near = new_pos.moved(dx, dy)
            if not _in_bounds(near):
                continue
            target = self.object_at(near)
            if target is None:
                continue
            other = target.kind()
            if can_defeat(me, other):
                idx = self._index_of(target)
                maker = _MAKERS.get(me)
                if idx is not None and maker is not None:
                    self.objects[idx] = maker(near.x, near.y)
            elif can_defeat(other, me):
                new_player = _MAKERS[other](old_pos.x, old_pos.y)
                idx = self._index_of(self.player)
                if idx is not None:
                    self.objects[idx] = new_player
                    self.current_index = idx
                self.player = new_player
                if new_player.kind() != "RR":
                    self._switch_to_next_rr()

        rocks = self._counts()["RR"]
        self.print_status()
        if rocks == len(self.objects):
            self._finish(WIN_MESSAGE)
        elif rocks == 0:
            self._finish(LOSE_MESSAGE)

    def update(self) -> None:
        """Move every other object one random step and let it convert its neighbours."""
        conversions: list[tuple[GameObject, GameObject]] = []
        for obj in self.objects:
            if obj is self.player:
                continue
            new_pos = obj.position.moved(*_STEPS[self._rng.randrange(len(_STEPS))])
            if not _in_bounds(new_pos):
                continue
            obj.position = new_pos
            attacker = obj.kind()
            for dx, dy in _STEPS:
                near = new_pos.moved(dx, dy)
                if not _in_bounds(near):
                    continue
                target = self.object_at(near)
                if target is None or target is self.player:
                    continue
                if can_defeat(attacker, target.kind()):
                    conversions.append((obj, target))

        for attacker, target in conversions:
            pos = target.position
            maker = _MAKERS.get(attacker.kind())
            idx = self._index_of(target)
            if idx is not None and maker is not None:
                self.objects[idx] = maker(pos.x, pos.y)