# rpsarena

A small rock-paper-scissors arena that runs in your terminal.

The board is a 20 × 20 grid. Rocks (`RR`, red), papers (`PP`, green) and
scissors (`SS`, blue) share it:

- rock beats scissors
- scissors beats paper
- paper beats rock

You play the rocks.

## Installing

```
pip install .
```

The game needs a POSIX terminal (it uses `termios`) that understands ANSI
colour codes.

## Playing

```
rpsarena
```

The board advances about once per second. Keys:

| Key             | Action                                        |
|-----------------|-----------------------------------------------|
| `w` `a` `s` `d` | move the rock you control up/left/down/right  |
| `c`             | pass control to the next rock on the board    |
| `Esc`           | quit                                          |

Moves that would leave the board are ignored.

After you move, each piece next to your new square is checked:

- a piece you beat is turned into your kind;
- a piece that beats you turns your own piece into its kind. If you are no
  longer a rock, control passes to the next rock on the board; if there is
  none, you lose.

After each move a status line such as `[Status] RR: 4, PP: 3, SS: 3` shows how
many of each kind are left. You win when every piece is a rock and lose when
no rock is left; the game then prints `You win!` or `You lose!`.

Every frame, each piece you do not control tries one step in a random
direction (staying put if that step would leave the board). A piece that
lands next to a piece it beats turns that piece into its own kind, except
that these wandering pieces never convert the piece you control.

When you quit with `Esc`, an identification line is printed. Its text can be
set with `--id`:

```
rpsarena --id 12345
```

## Using the pieces from Python

The modules can be used on their own:

- `rpsarena.unit` – `Vec2` (with `moved(dx, dy)`), `Color`, `Direction` and
  the board dimensions.
- `rpsarena.ansi` – `ansi_print(text, fg, bg, hi, blinking)` and
  `ansi_style(text, hi, blinking)` wrap text in ANSI escape sequences.
- `rpsarena.icon` – `Cell`, `icon_width`, `icon_height` and the stock icons
  `player_icon`, `rock_icon`, `paper_icon`, `scissors_icon`.
- `rpsarena.game_object` – `GameObject` and `Rock`, `Paper`, `Scissors`,
  `Player`, created with `create_rock`, `create_paper`, `create_scissors`,
  `create_player`.
- `rpsarena.rps` – `RPSType`, `wins_against`, the `Collider` interface and
  `RPSGameObject`, a piece that moves in its `direction` each update and
  converts, or is converted by, a piece it collides with.
- `rpsarena.game_model` – `GameModel`, a self-running arena of
  `RPSGameObject`s with `update()`, `handle_input(direction)` and
  `switch_control()`; it sets `game_over` and `winner` once only one type is
  left. The `rpsarena` command does not use it.
- `rpsarena.view` – `View` draws a board, redrawing only when something
  changed; `display_width(text)` measures terminal columns.
- `rpsarena.controller` – `Controller` runs the game loop; `can_defeat`,
  `GameOver`, `raw_terminal()` and `read_input()` support it.

```python
from rpsarena.ansi import ansi_print
from rpsarena.unit import Color
from rpsarena.game_object import create_rock
from rpsarena.controller import can_defeat

print(ansi_print("hello", Color.YELLOW, Color.RED, True, False))
rock = create_rock(3, 4)
print(rock.kind())               # "RR"
print(can_defeat("RR", "SS"))    # True
```

## Running the tests

```
pip install ".[test]"
pytest
```