"""Bit masks of the squares lying strictly between two squares of a chess board.

Squares are numbered 0..63, rank-major: square ``i`` sits on rank ``i // 8``
and file ``i % 8``. Two squares on the same rank, file or diagonal have as
mask the squares strictly between them; any other pair has an empty mask.
"""

from __future__ import annotations

BOARD_SQUARES = 64


def _line_step(i: int, j: int) -> int:
    """Step from the lower square ``i`` towards ``j``, or 0 if not on a line."""
    i_rank, i_file = divmod(i, 8)
    j_rank, j_file = divmod(j, 8)

    if j_rank == i_rank:
        return 1
    if j_file == i_file:
        return 8
    if j_file - i_file == j_rank - i_rank:
        return 9
    if i_file - j_file == j_rank - i_rank:
        return 7
    return 0


def _build_table() -> tuple[tuple[int, ...], ...]:
    table = [[0] * BOARD_SQUARES for _ in range(BOARD_SQUARES)]
    for i in range(BOARD_SQUARES):
        for j in range(i + 1, BOARD_SQUARES):
            step = _line_step(i, j)
            if not step:
                continue
            mask = 0
            for k in range(i + step, j, step):
                mask |= 1 << k
            table[i][j] = mask
            table[j][i] = mask
    return tuple(tuple(row) for row in table)


_BETWEEN = _build_table()


def between_mask(i: int, j: int) -> int:
    """Return the mask of squares strictly between squares ``i`` and ``j``."""
    for square in (i, j):
        if not 0 <= square < BOARD_SQUARES:
            raise ValueError(f"square index out of range: {square}")
    return _BETWEEN[i][j]