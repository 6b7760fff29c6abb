"""The game of the Amazons on a rectangular board.

A position is a sequence of ``width * height`` cell values in layer order
``x + width * y``: 0 is an empty square, 1 a queen of side 0, 2 a queen of
side 1 and 3 a burnt square. A move slides one queen like a chess queen to an
empty square, then the queen shoots an arrow, again moving like a queen, that
burns the square it lands on.
"""

from __future__ import annotations

from typing import Sequence

Position = tuple[int, ...]

_CELL_CHARS = ".wb*"

_DIRECTIONS = ((0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1))

_CORNER_OFFSETS = {4: 1, 5: 1, 6: 1, 7: 1, 8: 2, 9: 2, 10: 3}

_QueenMoves = list[list[tuple[int, tuple[int, ...]]]]


class AmazonsGame:
    """Move generation for the game of the Amazons."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid board size {width}x{height}")
        self.width = width
        self.height = height
        self.name = f"amazons_{width}x{height}"
        self._queen_moves = self._build_queen_moves()

    def _layer(self, x: int, y: int) -> int:
        return y * self.width + x

    def _build_queen_moves(self) -> _QueenMoves:
        """For each square, the squares a queen reaches and those passed over."""
        moves: _QueenMoves = []
        for from_layer in range(self.width * self.height):
            y, x = divmod(from_layer, self.width)
            targets = []
            for dx, dy in _DIRECTIONS:
                between: list[int] = []
                cx, cy = x + dx, y + dy
                while 0 <= cx < self.width and 0 <= cy < self.height:
                    to_layer = self._layer(cx, cy)
                    targets.append((to_layer, tuple(between)))
                    between.append(to_layer)
                    cx += dx
                    cy += dy
            moves.append(targets)
        return moves

    def _validated(self, position: Sequence[int]) -> Position:
        board = tuple(int(value) for value in position)
        if len(board) != len(self._queen_moves) or not set(board) <= {0, 1, 2, 3}:
            raise ValueError(f"not a {self.width}x{self.height} amazons position")
        return board

    def initial_position(self) -> Position:
        """Return the standard starting position of four queens per side.

        Only boards whose smaller dimension is between 4 and 10 have one.
        """
        corner = _CORNER_OFFSETS.get(min(self.width, self.height))
        if corner is None:
            raise ValueError(
                f"no initial position for a {self.width}x{self.height} board"
            )
        right, top = self.width - 1, self.height - 1
        queens = {
            1: ((corner, 0), (right - corner, 0), (0, corner), (right, corner)),
            2: ((0, top - corner), (right, top - corner), (corner, top), (right - corner, top)),
        }
        board = [0] * len(self._queen_moves)
        for piece, squares in queens.items():
            for x, y in squares:
                board[self._layer(x, y)] = piece
        return tuple(board)

    def position_to_string(self, position: Sequence[int]) -> str:
        """Render a position as one line per row, highest row first."""
        board = self._validated(position)
        lines = [
            "".join(_CELL_CHARS[value] for value in board[y * self.width:(y + 1) * self.width])
            for y in reversed(range(self.height))
        ]
        return "".join(line + "\n" for line in lines)

    def validate_moves(self, side_to_move: int, position: Sequence[int]) -> list[Position]:
        """Return every position reachable by one move and shot of ``side_to_move``."""
        if side_to_move not in (0, 1):
            raise ValueError(f"side to move must be 0 or 1, not {side_to_move}")
        board = self._validated(position)
        queen = 1 + side_to_move

        def clear(layers: Sequence[int], ignore: int = -1) -> bool:
            return all(board[layer] == 0 for layer in layers if layer != ignore)

        output: list[Position] = []
        for from_layer, value in enumerate(board):
            if value != queen:
                continue
            for to_layer, between in self._queen_moves[from_layer]:
                if board[to_layer] != 0 or not clear(between):
                    continue
                for shot_layer, shot_between in self._queen_moves[to_layer]:
                    # the square just vacated counts as empty for the shot
                    if shot_layer != from_layer and board[shot_layer] != 0:
                        continue
                    if not clear(shot_between, ignore=from_layer):
                        continue
                    after = list(board)
                    after[from_layer] = 0
                    after[to_layer] = queen
                    after[shot_layer] = 3
                    output.append(tuple(after))
        return output