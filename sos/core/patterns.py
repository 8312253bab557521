from __future__ import annotations

from typing import Tuple

from sos.core.board import Board, Cell


# 4 unique axes (opposites are implied)
AXES: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (1, -1))

# all 8 neighbour directions as (d_row, d_col)
DIRECTIONS: Tuple[Tuple[int, int], ...] = AXES + tuple((-dr, -dc) for dr, dc in AXES)


def _cell_at(board: Board, row: int, col: int) -> Cell:
    """Cell at (row, col), or EMPTY when off the board."""
    if not board.in_bounds(row, col):
        return Cell.EMPTY
    return board.get(row, col)


def count_sos(board: Board, row: int, col: int) -> int:
    """
    Count S-O-S lines completed by the cell at (row, col).

      - O: the O is the middle; check each axis for S on both sides.
      - S: the S is an end; check each direction for O then S.
      - EMPTY: nothing can be completed.

    Off-board neighbours never match, so edge cells only score along the
    lines that fit.
    """
    placed = board.get(row, col)

    if placed == Cell.O:
        count = 0
        for dr, dc in AXES:
            if (
                _cell_at(board, row + dr, col + dc) == Cell.S
                and _cell_at(board, row - dr, col - dc) == Cell.S
            ):
                count += 1
        return count

    if placed == Cell.S:
        count = 0
        for dr, dc in DIRECTIONS:
            if (
                _cell_at(board, row + dr, col + dc) == Cell.O
                and _cell_at(board, row + 2 * dr, col + 2 * dc) == Cell.S
            ):
                count += 1
        return count

    return 0
