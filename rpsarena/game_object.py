"""Objects placed on the arena, and functions that create them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .icon import Icon, paper_icon, player_icon, rock_icon, scissors_icon
from .unit import Position, Vec2


class GameObject(ABC):
    """Something with a position and an icon that can be drawn."""

    def __init__(self, position: Position, icon: Icon) -> None:
        self.position = position
        self.icon = icon

    def update(self) -> None:
        """Advance one frame; the default does nothing."""

    def move(self, dx: int, dy: int) -> None:
        """Shift the object by ``(dx, dy)``."""
        self.position = self.position.moved(dx, dy)

    @abstractmethod
    def kind(self) -> str:
        """Short label identifying what the object is."""


class Rock(GameObject):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(Vec2(x, y), rock_icon())

    def kind(self) -> str:
        return "RR"


class Paper(GameObject):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(Vec2(x, y), paper_icon())

    def kind(self) -> str:
        return "PP"


class Scissors(GameObject):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(Vec2(x, y), scissors_icon())

    def kind(self) -> str:
        return "SS"


class Player(GameObject):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(Vec2(x, y), player_icon())

    def kind(self) -> str:
        return "ME"


def create_rock(x: int, y: int) -> GameObject:
    return Rock(x, y)


def create_paper(x: int, y: int) -> GameObject:
    return Paper(x, y)


def create_scissors(x: int, y: int) -> GameObject:
    return Scissors(x, y)


def create_player(x: int, y: int) -> GameObject:
    return Player(x, y)