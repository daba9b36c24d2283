"""Command-line entry point that starts the arena game."""

from __future__ import annotations

import argparse

from .ansi import ansi_print
from .controller import Controller
from .unit import Color
from .view import View

_DEFAULT_ID = "112207321"


def format_id(student_id: str) -> str:
    """The highlighted, blinking identification line shown after play."""
    return ansi_print(f"ID: {student_id}", Color.YELLOW, Color.RED, True, True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rpsarena",
        description="Steer a rock around the arena and convert every piece to rock.",
    )
    parser.add_argument(
        "--id", dest="student_id", default=_DEFAULT_ID, help="identifier to print on exit"
    )
    args = parser.parse_args(argv)

    controller = Controller(View())
    if controller.run() is None:
        print(format_id(args.student_id), end="\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())