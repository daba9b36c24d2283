import io

from rpsarena.ansi import ansi_print
from rpsarena.game_object import create_paper, create_rock
from rpsarena.unit import (
    GAME_WINDOW_CELL_WIDTH,
    GAME_WINDOW_HEIGHT,
    GAME_WINDOW_WIDTH,
    Color,
)
from rpsarena.view import View, display_width


def _view(size=(30, 80)):
    out = io.StringIO()
    return View(out=out, terminal_size=lambda: size), out


def test_display_width_of_ascii_text():
    assert display_width("RR") == 2


def test_display_width_is_at_least_one():
    assert display_width("") == 1


def test_display_width_of_wide_character():
    assert display_width("中") == 2


def test_reset_latest_blanks_the_frame():
    view, _ = _view()
    view.update_game_object(create_rock(3, 4))
    view.reset_latest()
    assert all(cell == " " for row in view.latest_map for cell in row)
    assert all(c == Color.NOCHANGE for row in view.latest_bg for c in row)


def test_update_game_object_paints_text_and_background():
    view, _ = _view()
    view.update_game_object(create_paper(3, 4))
    assert view.latest_map[4][3] == "PP"
    assert view.latest_bg[4][3] == Color.GREEN
    assert view.latest_fg[4][3] == Color.NOCHANGE


def test_update_game_object_outside_arena_is_clipped():
    view, _ = _view()
    view.update_game_object(create_rock(GAME_WINDOW_WIDTH, 0))
    view.update_game_object(create_rock(-1, 0))
    assert all(cell == " " for row in view.latest_map for cell in row)


def test_first_render_clears_screen_and_draws_frame():
    view, out = _view()
    frame = view.render()
    lines = frame.splitlines()
    assert len(lines) == GAME_WINDOW_HEIGHT + 2
    border = "+" + "-" * (GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH) + "+"
    assert lines[0] == border
    assert lines[-1] == border
    assert out.getvalue().startswith("\033[2J\033[H")
    assert out.getvalue().endswith(frame)


def test_rendered_row_contains_icon_cell():
    view, _ = _view()
    view.update_game_object(create_rock(0, 0))
    lines = view.render().splitlines()
    assert lines[1].startswith("|" + ansi_print("RR", Color.NOCHANGE, Color.RED))
    blank = ansi_print(" ", Color.NOCHANGE, Color.NOCHANGE)
    assert lines[2] == "|" + blank * (GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH) + "|"


def test_unchanged_frame_is_not_redrawn():
    view, out = _view()
    view.render()
    before = out.getvalue()
    assert view.render() == ""
    assert out.getvalue() == before


def test_resize_clears_screen_even_without_changes():
    size = [(30, 80)]
    out = io.StringIO()
    view = View(out=out, terminal_size=lambda: size[0])
    view.render()
    size[0] = (40, 100)
    before = out.getvalue()
    assert view.render() == ""
    assert out.getvalue() == before + "\033[2J\033[H"


def test_changed_frame_is_redrawn():
    view, _ = _view()
    view.render()
    view.reset_latest()
    view.update_game_object(create_paper(5, 5))
    frame = view.render()
    assert ansi_print("PP", Color.NOCHANGE, Color.GREEN) in frame