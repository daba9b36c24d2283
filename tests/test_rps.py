import itertools

import pytest

from rpsarena.game_object import create_rock
from rpsarena.icon import paper_icon, rock_icon, scissors_icon
from rpsarena.rps import Collider, RPSGameObject, RPSType, wins_against
from rpsarena.unit import Direction, Vec2


def test_classic_rules():
    assert wins_against(RPSType.ROCK, RPSType.SCISSORS)
    assert wins_against(RPSType.SCISSORS, RPSType.PAPER)
    assert wins_against(RPSType.PAPER, RPSType.ROCK)


@pytest.mark.parametrize("a,b", list(itertools.product(RPSType, RPSType)))
def test_at_most_one_side_wins(a, b):
    assert not (wins_against(a, b) and wins_against(b, a))
    if a == b:
        assert not wins_against(a, b)


@pytest.mark.parametrize("t", list(RPSType))
def test_each_type_beats_exactly_one(t):
    assert sum(wins_against(t, o) for o in RPSType) == 1


@pytest.mark.parametrize(
    "direction,dx,dy",
    [
        (Direction.UP, 0, -1),
        (Direction.DOWN, 0, 1),
        (Direction.LEFT, -1, 0),
        (Direction.RIGHT, 1, 0),
    ],
)
def test_update_steps_in_direction(direction, dx, dy):
    obj = RPSGameObject(Vec2(5, 5), RPSType.PAPER, direction)
    obj.update()
    assert obj.position == Vec2(5, 5).moved(dx, dy)


@pytest.mark.parametrize(
    "t,icon,label",
    [
        (RPSType.ROCK, rock_icon(), "RR"),
        (RPSType.PAPER, paper_icon(), "PP"),
        (RPSType.SCISSORS, scissors_icon(), "SS"),
    ],
)
def test_setting_type_updates_icon(t, icon, label):
    obj = RPSGameObject(Vec2(0, 0), RPSType.ROCK)
    obj.rps_type = t
    assert obj.rps_type == t
    assert obj.icon == icon
    assert obj.kind() == label


def test_intersect_by_position():
    a = RPSGameObject(Vec2(2, 2))
    b = RPSGameObject(Vec2(2, 2), RPSType.PAPER)
    c = RPSGameObject(Vec2(3, 2))
    assert a.intersect(b)
    assert not a.intersect(c)


def test_intersect_ignores_other_kinds():
    a = RPSGameObject(Vec2(1, 1))
    assert not a.intersect(create_rock(1, 1))  # type: ignore[arg-type]


def test_winner_converts_other():
    rock = RPSGameObject(Vec2(0, 0), RPSType.ROCK)
    scissors = RPSGameObject(Vec2(0, 0), RPSType.SCISSORS)
    rock.on_collision(scissors)
    assert scissors.rps_type == RPSType.ROCK
    assert scissors.icon == rock_icon()


def test_loser_is_converted():
    rock = RPSGameObject(Vec2(0, 0), RPSType.ROCK)
    paper = RPSGameObject(Vec2(0, 0), RPSType.PAPER)
    rock.on_collision(paper)
    assert rock.rps_type == RPSType.PAPER
    assert paper.rps_type == RPSType.PAPER


def test_tie_changes_nothing():
    a = RPSGameObject(Vec2(0, 0), RPSType.SCISSORS)
    b = RPSGameObject(Vec2(0, 0), RPSType.SCISSORS)
    a.on_collision(b)
    assert (a.rps_type, b.rps_type) == (RPSType.SCISSORS, RPSType.SCISSORS)


def test_collider_is_abstract():
    with pytest.raises(TypeError):
        Collider()  # type: ignore[abstract]