# triquigo

Board logic and game rules for *triqui* (tic-tac-toe), with two ways to play
against a computer opponent:

- **Traditional**: you play `X`, the computer answers with `O` in a random free
  cell. The first to complete a row, column or diagonal wins.
- **Synchronized**: you and the computer move at the same time. The computer
  always takes the first free cell. If you both pick the same cell, it is
  blocked for one turn. If you both complete a line on the same move, both
  lines are cleared and the game goes on.

## Installation

```
pip install triquigo
```

To run the tests:

```
pip install "triquigo[test]"
pytest
```

## The board

Cells are numbered 0 to 8:

```
0|1|2
3|4|5
6|7|8
```

A cell holds one of the `Mark` values: `Mark.EMPTY` (`" "`), `Mark.X`,
`Mark.O` or `Mark.BLOCKED` (`"-"`).

```python
from triquigo.board import Board, Mark

board = Board()
board[0] = board[1] = board[2] = Mark.X

board.winner()             # ((0, 1, 2), Mark.X)
board.winning_trio(Mark.O) # raises NoWinner
board.available()          # [3, 4, 5, 6, 7, 8]
board.first_available()    # 3
```

A `Board` can also be built from an iterable of up to nine marks
(`Board("XXX")`) or from a mapping of index to mark (`Board({0: "X", 4: "X"})`);
cells that are not given stay empty. Boards compare equal when all their cells
are equal.

- `Board.winner()` returns the first completed line and its mark, or
  `(None, Mark.EMPTY)` when nobody has won.
- `Board.winning_trio(mark)` returns the first line completed by `mark` and
  raises `NoWinner` when there is none.
- `Board.available()` lists the empty cells in order; `Board.first_available()`
  returns the first of them, or `0` when the board is full.
- `Board.random_available(rng=None)` picks an empty cell with the given
  `random.Random` (or the `random` module) and raises `ValueError` when there
  is none.
- `Board.clear_blocked()` empties the first blocked cell.
- `Board.fill_trio(trio, mark)` and `Board.empty_trio(trio)` set or clear the
  cells of a line.
- `all_cells()` returns the indices `0` to `8`.

## Playing a game

```python
import random

from triquigo.game import Game, GameMode, GameStatus, parse_cell_index

game = Game(GameMode.TRADITIONAL, random.Random(7))
status = game.play_traditional(parse_cell_index("4"))
print(status)        # GameStatus.IN_PLAY, WON, LOST or DRAW
print(game.board)    # e.g. Board('    X O  ')

game.reset()
```

Each play method updates `game.status` and returns it. For a synchronized game
call `play_synchronized`; after each move `game.winning_board` shows the lines
completed on that move. `Game.mode` only records the chosen `GameMode`: either
play method can be called whatever the mode is. `reset()` empties both boards
and sets the status back to `GameStatus.IN_PLAY`.

`parse_cell_index` takes the first character of a string and returns it as a
digit. It raises `ValueError` when the string is empty or does not start with
a digit.

## What this package does not do

It holds the board and the game rules only. There is no web server, no pages
or templates to play in a browser, and no command to start a game; the caller
decides how moves are read in and how the board is shown.