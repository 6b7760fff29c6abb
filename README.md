# dfagames

Rules and move generation for several two-player board games. It is written in
plain Python and has no runtime dependencies.

## What is inside

- `dfagames.board.Board` is a chess position read from a FEN string.
  - `generate_moves()` returns the positions reached by each legal move. This
    includes castling, en passant and promotion to queen, bishop, knight or rook.
  - `count_moves()` returns the number of legal moves.
  - `is_check()`, `is_checkmate()` and `is_stalemate()` report check and the end
    of the game.
  - `is_draw()` reports a draw. It combines `is_draw_by_rule()`, the fifty-move
    rule, with `is_draw_by_material()`: king against king, or king against king
    and a single bishop or knight.
  - `is_attacked(side, square)` tells whether a square is attacked.
  - `is_final()` tells whether the game is over.
  - `to_string()` and `str()` return an 8x8 text picture of the board.
  - Boards can be compared, sorted and hashed.
- `dfagames.board.Piece` lists the chess piece types.
- `dfagames.ataxx.AtaxxGame(width, height)` plays Ataxx.
  - Moves are clones and jumps. The pieces next to the destination square are
    captured.
  - A side with no move passes, but only when it holds at least half the board
    and the opponent can move.
  - `validate_result` scores a finished position as 1, -1 or 0.
- `dfagames.breakthrough` plays Breakthrough in two square layouts:
  `BreakthroughRowWiseGame` (also available as `BreakthroughGame`) and
  `BreakthroughColumnWiseGame`. Boards must be at least 4 rows tall.
  `validate_moves` returns no moves once the opponent has reached its goal row.
- `dfagames.amazons.AmazonsGame(width, height)` plays the game of the Amazons. A
  move is a queen move followed by an arrow shot. `initial_position()` works
  only for boards whose smaller side is from 4 to 10 squares.
- `dfagames.masks.between_mask(i, j)` returns a bitboard of the squares strictly
  between two chess squares on one rank, file or diagonal. For any other pair
  of squares it returns 0.
- `dfagames.binary_function.BinaryFunction` wraps a boolean function of two
  arguments.
  - `has_left_sink` / `has_right_sink` tell whether a value on that side fixes
    the result.
  - `left_sink()` / `right_sink()` return the sink value, or `None` if there is
    none.
  - `is_commutative()` tells whether swapping the arguments leaves the result
    unchanged.
- `dfagames.side.Side` is `WHITE` or `BLACK`. Its `flip()` method returns the
  other side.

The game modules describe a position as a tuple of small integers, one for
each square. Each game module gives the meaning of each value in its
docstring. `initial_position()` returns the starting position,
`position_to_string()` renders a position as text, and
`validate_moves(side_to_move, position)` lists every position that the side to
move can reach in one move. Sides are 0 and 1. Malformed positions and invalid
sides raise `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Count the legal moves in the chess starting position:

```python
from dfagames.board import Board

board = Board("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
print(board.count_moves())   # 20
print(board)
```

Expand an Ataxx position:

```python
from dfagames.ataxx import AtaxxGame

game = AtaxxGame(4, 4)
start = game.initial_position()
print(game.position_to_string(start))
for child in game.validate_moves(0, start):
    print(game.position_to_string(child))
```

Inspect a boolean operator:

```python
from dfagames.binary_function import BinaryFunction

conj = BinaryFunction(lambda a, b: a and b)
print(conj.has_left_sink(False), conj.is_commutative())   # True True
print(conj.left_sink())                                    # 0
```

## What it does not do

This is a library of rules only. It has no command-line program and no
interface for playing games. It does not search or solve games, and it does
not store positions or results. It works one position at a time and cannot
represent or compute whole sets of positions.