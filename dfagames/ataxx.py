"""Ataxx on a rectangular board.

A position is a sequence of ``width * height`` cell values, one per square,
in layer order ``x + width * y``: 0 is an empty square, 1 a black piece and
2 a white piece. Side 0 (black) plays the 1s and side 1 (white) the 2s.
"""

from __future__ import annotations

from typing import Iterator, Sequence

Position = tuple[int, ...]

_CELL_CHARS = ".bw"


class AtaxxGame:
    """Move generation and scoring for Ataxx positions."""

    def __init__(self, width: int, height: int) -> None:
        if min(width, height) < 1:
            raise ValueError("board dimensions must be positive")
        self.width, self.height = width, height
        self.size = width * height
        self.name = f"ataxx_{width}x{height}"

    def _layer(self, x: int, y: int) -> int:
        return x + self.width * y

    def _around(self, x: int, y: int, reach: int) -> Iterator[tuple[int, int, int]]:
        """Yield ``(dx, dy, layer)`` for squares within ``reach`` of ``(x, y)``."""
        for dx in range(-reach, reach + 1):
            for dy in range(-reach, reach + 1):
                nx, ny = x + dx, y + dy
                if (dx or dy) and 0 <= nx < self.width and 0 <= ny < self.height:
                    yield dx, dy, self._layer(nx, ny)

    def _cells(self, side_to_move: int, position: Sequence[int]) -> Position:
        if side_to_move not in (0, 1):
            raise ValueError(f"side to move must be 0 or 1, not {side_to_move}")
        return self._board(position)

    def _board(self, position: Sequence[int]) -> Position:
        cells = tuple(map(int, position))
        if len(cells) != self.size or not set(cells) <= {0, 1, 2}:
            raise ValueError(f"not a {self.width}x{self.height} ataxx position")
        return cells

    def move_name(self, x1: int, y1: int, x2: int, y2: int) -> str:
        """Return the name of the move from ``(x1, y1)`` to ``(x2, y2)``."""
        return f"move from x={x1},y={y1} to x={x2},y={y2}"

    def initial_position(self) -> Position:
        """Return the starting position: a piece in each corner."""
        right, bottom = self.width - 1, self.height - 1
        cells = [0] * self.size
        for x, y, piece in ((0, 0, 1), (right, bottom, 1), (right, 0, 2), (0, bottom, 2)):
            cells[self._layer(x, y)] = piece
        return tuple(cells)

    def position_to_string(self, position: Sequence[int]) -> str:
        """Render a position as one line of characters per row, top row first."""
        cells = self._board(position)
        return "".join(
            "".join(_CELL_CHARS[c] for c in cells[y * self.width:(y + 1) * self.width]) + "\n"
            for y in range(self.height)
        )

    def _direct_moves(self, side_to_move: int, cells: Position) -> Iterator[Position]:
        """Yield the positions reached by clone and jump moves, without passes."""
        mine, theirs = 1 + side_to_move, 2 - side_to_move
        for x_src in range(self.width):
            for y_src in range(self.height):
                src = self._layer(x_src, y_src)
                if cells[src] != mine:
                    continue
                for dx, dy, dst in self._around(x_src, y_src, 2):
                    if cells[dst] != 0:
                        continue
                    new_cells = list(cells)
                    if max(abs(dx), abs(dy)) > 1:
                        # jump: the source square is vacated
                        new_cells[src] = 0
                    new_cells[dst] = mine
                    for _, _, adj in self._around(dst % self.width, dst // self.width, 1):
                        if new_cells[adj] == theirs:
                            new_cells[adj] = mine
                    yield tuple(new_cells)

    def validate_moves(self, side_to_move: int, position: Sequence[int]) -> list[Position]:
        """Return every position reachable by one move of ``side_to_move``.

        A side with no move passes (the position itself is returned) when it
        holds at least half the board and the opponent can move.
        """
        cells = self._cells(side_to_move, position)
        output = list(self._direct_moves(side_to_move, cells))
        if output or cells.count(1 + side_to_move) * 2 < self.size:
            return output
        if any(child != cells for child in self._direct_moves(1 - side_to_move, cells)):
            output.append(cells)
        return output

    def validate_result(self, side_to_move: int, position: Sequence[int]) -> int:
        """Score a position for ``side_to_move``: 1 won, -1 lost, 0 otherwise."""
        cells = self._cells(side_to_move, position)
        black, white = cells.count(1), cells.count(2)
        over = black == 0 or white == 0 or black + white == self.size
        if not over or black == white:
            return 0
        winner = 0 if black > white else 1
        return 1 if side_to_move == winner else -1