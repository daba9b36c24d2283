"""Icons: small grids of coloured text cells, and the game's stock icons."""

from __future__ import annotations

from dataclasses import dataclass

from .unit import Color


@dataclass(frozen=True)
class Cell:
    """One character cell of an icon."""

    color: Color
    ascii: str


Icon = list[list[Cell]]


def icon_width(icon: Icon) -> int:
    """Number of columns in the icon's first row, or 0 for an empty icon."""
    return len(icon[0]) if icon else 0


def icon_height(icon: Icon) -> int:
    """Number of rows in the icon."""
    return len(icon)


def player_icon() -> Icon:
    return [[Cell(Color.RED, "RR")]]


def rock_icon() -> Icon:
    return [[Cell(Color.RED, "RR")]]


def paper_icon() -> Icon:
    return [[Cell(Color.GREEN, "PP")]]


def scissors_icon() -> Icon:
    return [[Cell(Color.BLUE, "SS")]]