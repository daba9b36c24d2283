"""Rock-paper-scissors objects that move and convert each other on contact."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from .game_object import GameObject
from .icon import Icon, paper_icon, rock_icon, scissors_icon
from .unit import Direction, Position, Vec2


class RPSType(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2


_BEATS = {
    RPSType.ROCK: RPSType.SCISSORS,
    RPSType.SCISSORS: RPSType.PAPER,
    RPSType.PAPER: RPSType.ROCK,
}

_LABELS = {RPSType.ROCK: "RR", RPSType.PAPER: "PP", RPSType.SCISSORS: "SS"}

_ICONS = {
    RPSType.ROCK: rock_icon,
    RPSType.PAPER: paper_icon,
    RPSType.SCISSORS: scissors_icon,
}

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def wins_against(me: RPSType, other: RPSType) -> bool:
    """True when ``me`` beats ``other``."""
    return _BEATS[me] == other


class Collider(ABC):
    """Something that can detect and react to contact with another collider."""

    @abstractmethod
    def intersect(self, other: Collider) -> bool:
        """True when this collider touches ``other``."""

    @abstractmethod
    def on_collision(self, other: Collider) -> None:
        """React to touching ``other``."""


class RPSGameObject(GameObject, Collider):
    """A moving rock, paper or scissors whose icon follows its type."""

    def __init__(
        self,
        position: Position = Vec2(0, 0),
        rps_type: RPSType = RPSType.ROCK,
        direction: Direction = Direction.UP,
    ) -> None:
        super().__init__(position, _ICONS[rps_type]())
        self._type = rps_type
        self.direction = direction

    @property
    def rps_type(self) -> RPSType:
        return self._type

    @rps_type.setter
    def rps_type(self, value: RPSType) -> None:
        self._type = value
        self.icon: Icon = _ICONS[value]()

    def kind(self) -> str:
        return _LABELS[self._type]

    def update(self) -> None:
        """Step one cell in the current direction."""
        self.move(*_STEPS[self.direction])

    def intersect(self, other: Collider) -> bool:
        if not isinstance(other, RPSGameObject):
            return False
        return self.position == other.position

    def on_collision(self, other: Collider) -> None:
        """The winner converts the loser to its own type; a tie changes nothing."""
        if not isinstance(other, RPSGameObject):
            return
        mine, theirs = self.rps_type, other.rps_type
        if wins_against(mine, theirs):
            other.rps_type = mine
        elif wins_against(theirs, mine):
            self.rps_type = theirs