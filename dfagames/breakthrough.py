"""Breakthrough on a rectangular board.

A position is a sequence of ``width * height`` cell values: 0 is an empty
square, 1 a piece of side 0 and 2 a piece of side 1. Side 0 starts on rows 0
and 1 and advances towards higher rows; side 1 starts on the last two rows
and advances towards row 0. A side wins by reaching the far row.

How a (row, column) square maps to a cell index depends on the layout:
row-wise boards number squares row by row, column-wise boards column by
column.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

Position = tuple[int, ...]

_CELL_CHARS = ".xo"


class BreakthroughBase(ABC):
    """Move generation for Breakthrough, independent of the square layout."""

    def __init__(self, name: str, width: int, height: int) -> None:
        if width < 1:
            raise ValueError("board width must be at least 1")
        if height < 4:
            raise ValueError("board height must be at least 4")
        self.name = name
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        """Number of squares on the board."""
        return self.height * self.width

    @abstractmethod
    def calculate_layer(self, row: int, column: int) -> int:
        """Return the cell index of the square at ``row``, ``column``."""

    def _row(self, cells: Position, row: int) -> list[int]:
        return [cells[self.calculate_layer(row, column)] for column in range(self.width)]

    def _parse(self, position: Sequence[int]) -> Position:
        parsed = tuple(int(value) for value in position)
        if len(parsed) != self.size:
            raise ValueError(f"expected {self.size} cells, got {len(parsed)}")
        if not all(0 <= value < len(_CELL_CHARS) for value in parsed):
            raise ValueError("cells must be 0, 1 or 2")
        return parsed

    def initial_position(self) -> Position:
        """Return the starting position: two full rows for each side."""
        owner = {0: 1, 1: 1, self.height - 2: 2, self.height - 1: 2}
        cells = [0] * self.size
        for row, piece in owner.items():
            for column in range(self.width):
                cells[self.calculate_layer(row, column)] = piece
        return tuple(cells)

    def position_to_string(self, position: Sequence[int]) -> str:
        """Render a position as one line per row, row 0 first."""
        cells = self._parse(position)
        return "".join(
            "".join(_CELL_CHARS[value] for value in self._row(cells, row)) + "\n"
            for row in range(self.height)
        )

    def validate_moves(self, side_to_move: int, position: Sequence[int]) -> list[Position]:
        """Return every position reachable by one move of ``side_to_move``.

        No moves are returned once the opponent has reached its goal row.
        """
        if side_to_move not in (0, 1):
            raise ValueError(f"invalid side {side_to_move}")
        cells = self._parse(position)

        friendly, hostile = 1 + side_to_move, 2 - side_to_move
        forward = 1 if side_to_move == 0 else -1
        home_row = 0 if side_to_move == 0 else self.height - 1

        # the opponent has already won if it stands on our home row
        if hostile in self._row(cells, home_row):
            return []

        output: list[Position] = []
        for row_from in range(self.height):
            row_to = row_from + forward
            if not 0 <= row_to < self.height:
                continue
            for col_from in range(self.width):
                layer_from = self.calculate_layer(row_from, col_from)
                if cells[layer_from] != friendly:
                    continue
                for col_delta in (-1, 0, 1):
                    col_to = col_from + col_delta
                    if not 0 <= col_to < self.width:
                        continue
                    layer_to = self.calculate_layer(row_to, col_to)
                    target = cells[layer_to]
                    # no capturing own pieces; hostile pieces are taken diagonally only
                    if target == friendly or (col_delta == 0 and target == hostile):
                        continue
                    moved = list(cells)
                    moved[layer_from], moved[layer_to] = 0, friendly
                    output.append(tuple(moved))
        return output


class BreakthroughColumnWiseGame(BreakthroughBase):
    """Breakthrough with squares numbered column by column."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"breakthroughcw_{width}x{height}", width, height)

    def calculate_layer(self, row: int, column: int) -> int:
        return column * self.height + row


class BreakthroughRowWiseGame(BreakthroughBase):
    """Breakthrough with squares numbered row by row."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"breakthrough_{width}x{height}", width, height)

    def calculate_layer(self, row: int, column: int) -> int:
        return row * self.width + column


BreakthroughGame = BreakthroughRowWiseGame