"""A self-running arena of rock-paper-scissors objects."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable
from itertools import combinations

from .rps import RPSGameObject, RPSType
from .unit import Direction, Vec2

_INITIAL_OBJECTS = 5
_SPAWN_RANGE = 10


class GameModel:
    """Moves objects, resolves collisions and detects when one type remains."""

    def __init__(
        self,
        rng: random.Random | None = None,
        objects: Iterable[RPSGameObject] | None = None,
    ) -> None:
        self.controlled_index = 0
        self.game_over = False
        self.winner: RPSType | None = None
        if objects is not None:
            self.objects = list(objects)
        else:
            rng = rng or random.Random()
            self.objects = [self._spawn(rng) for _ in range(_INITIAL_OBJECTS)]

    @staticmethod
    def _spawn(rng: random.Random) -> RPSGameObject:
        x = rng.randrange(_SPAWN_RANGE)
        y = rng.randrange(_SPAWN_RANGE)
        direction = Direction(rng.randrange(len(Direction)))
        rps_type = RPSType(rng.randrange(len(RPSType)))
        return RPSGameObject(Vec2(x, y), rps_type, direction)

    def update(self) -> None:
        """Move everything, resolve collisions, and check for a winner."""
        if self.game_over:
            return
        for obj in self.objects:
            obj.update()
        for first, second in combinations(self.objects, 2):
            if first.intersect(second):
                first.on_collision(second)

        present = Counter(obj.rps_type for obj in self.objects)
        if len(present) == 1:
            self.game_over = True
            self.winner = next(iter(present))
            print(f"Game Over! {self.winner.name} wins!")

    def handle_input(self, direction: Direction) -> None:
        """Point the controlled object in ``direction``."""
        if self.controlled_index < len(self.objects):
            self.objects[self.controlled_index].direction = direction

    def switch_control(self) -> None:
        """Hand control to the next rock after the current one, if any."""
        count = len(self.objects)
        for step in range(1, count):
            idx = (self.controlled_index + step) % count
            if self.objects[idx].rps_type == RPSType.ROCK:
                self.controlled_index = idx
                break