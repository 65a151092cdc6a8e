# csweeper

Minesweeper for the terminal. The board is drawn with ANSI escape codes and
played entirely from the keyboard. It has no dependencies beyond the
standard library.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
csweeper
```

The main menu offers three choices, picked by typing the number and pressing
Enter:

1. **Select a Template**: one of the built-in difficulties:

   | Template | Size    | Bombs |
   |----------|---------|-------|
   | Easy     | 10 x 10 | 10    |
   | Medium   | 16 x 16 | 40    |
   | Hard     | 30 x 16 | 99    |
   | Expert   | 36 x 20 | 165   |
   | Master   | 36 x 30 | 252   |

   Choosing a number that is not in the list shows "The template doesn't
   exist..." and returns to the main menu.

2. **Play a Custom Game**: enter the width (10 to 60), the height (10 to 40)
   and the number of bombs (from 1 to width × height − 1). A value outside its
   range is refused and asked for again.
3. **Exit**.

The program also ends when standard input runs out or on Ctrl-C.

### Controls

| Key        | Action                                                    |
|------------|-----------------------------------------------------------|
| Arrow keys | Move the cursor                                           |
| Enter      | Reveal the cell under the cursor, or sweep a revealed one |
| F          | Toggle a flag on a covered cell                           |
| R          | Redraw the screen (after resizing the terminal)           |
| Esc        | Leave the game and go back to the menu                    |

Revealing a cell with no bombs around it opens up the whole empty area around
it. Pressing Enter on a revealed number whose surrounding flags match its count
reveals every unflagged neighbour at once; if a flag is in the wrong place,
this uncovers a bomb and the game is lost. Pressing Enter on a cell that holds
a bomb loses the game, even if that cell is flagged.

At the start of each game one cell with no bombs around it is marked with a
green `X` and the cursor is placed on it, so the first move need not be a
guess. If the board has no such cell there is no marker and the cursor starts
in the top-left corner.

Under the board you see how many flags you have placed against the number of
bombs, the elapsed time in seconds (up to 9999), and the name of the template
(or "Custom").

The game is won when every cell without a bomb has been revealed.

## Using it from Python

The pieces of the game can be used on their own:

```python
import random

from csweeper.board import Board

board = Board(10, 10)
bombs = board.generate(10, random.Random(1))   # positions of the bombs
blessing = board.find_blessing(random.Random(1))  # an (x, y) with no bombs around it, or None

revealed = board.reveal(*blessing)   # newly uncovered positions
board.toggle_flag(0, 0)
print(board.is_cleared, board.exploded)
```

- `csweeper.board` has `Cell` and `Board` (`cell`, `neighbours`,
  `place_bombs`, `generate`, `find_blessing`, `toggle_flag`, `reveal`,
  `sweep`, `bombs`).
- `csweeper.templates` has the `Template` dataclass and `default_templates()`,
  which returns the built-in difficulties.
- `csweeper.console` has `Console`, which writes cursor movement and
  256-colour ANSI sequences to a text stream, and the `Color` palette.
- `csweeper.keys` has `KeyReader`, a context manager that reads single key
  presses without blocking, `parse_key()` and `read_int()`.
- `csweeper.game` has `Game`, which can be driven key by key with
  `handle_key()` or played to the end with `run()`, and
  `start_custom_game()` / `start_template_game()`, which run a game on a given
  console and key reader.
- `csweeper.cli` has `run_app()`, the menu loop, and `main()`, the `csweeper`
  command.

## What it does not do

There is no mouse support, no high-score table and nothing is saved between
games: each round is played and then forgotten.

## Running the tests

```
pip install ".[test]"
pytest
```