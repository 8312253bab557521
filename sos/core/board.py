from typing import Any, Iterator, List, Tuple
import numpy as np
from enum import Enum


class Cell(Enum):
    """Cell constants."""
    EMPTY = 0
    S = 1
    O = 2

    def symbol(self) -> str:
        return {0: ".", 1: "S", 2: "O"}[self.value]

    @staticmethod
    def from_symbol(text: str) -> "Cell":
        """'S'/'O' (any case) map to a letter; anything else is EMPTY."""
        return {"S": Cell.S, "O": Cell.O}.get(text.strip().upper(), Cell.EMPTY)

    def __str__(self) -> str:
        return self.symbol()


class OutOfBoundsError(IndexError):
    """Raised when a (row, col) coordinate falls outside the board."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"Out of bounds: ({row}, {col}) for size={size}")
        self.row = row
        self.col = col
        self.size = size


class Board:
    """
    Square grid of cell values.

    - Uses 0-based (row, col) coordinates.
    - Internally stores a size x size numpy object array, so any value type
      can be kept (the game uses Cell).
    """

    def __init__(self, size: int, fill: Any = Cell.EMPTY) -> None:
        if not isinstance(size, int) or size <= 0:
            raise ValueError("size must be a positive integer")
        self._size: int = size
        self._grid = np.full((size, size), fill, dtype=object)

    @property
    def size(self) -> int:
        return self._size

    # ---------- Bounds / indexing ----------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self._size)

    # ---------- Cell access ----------

    def get(self, row: int, col: int) -> Any:
        """
        Value at (row, col).

        Raises:
            OutOfBoundsError if (row, col) is not on the board.
        """
        self._check(row, col)
        return self._grid[row, col]

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Write value at (row, col).

        Raises:
            OutOfBoundsError if (row, col) is not on the board. Nothing is
            written in that case.
        """
        self._check(row, col)
        self._grid[row, col] = value

    def reset(self, fill: Any = Cell.EMPTY) -> None:
        """Refill every cell, keeping the size."""
        self._grid.fill(fill)

    # ---------- Iteration / helpers ----------

    def iter_cells(self) -> Iterator[Tuple[int, int, Any]]:
        """Yield (row, col, value) in row-major order."""
        for r in range(self._size):
            for c in range(self._size):
                yield r, c, self._grid[r, c]

    def empty_positions(self, empty: Any = Cell.EMPTY) -> List[Tuple[int, int]]:
        """All (row, col) whose value equals `empty`."""
        return [(r, c) for r, c, v in self.iter_cells() if v == empty]

    def rows(self) -> List[List[Any]]:
        return [list(row) for row in self._grid]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self.rows() == other.rows()

    # ---------- Rendering ----------

    def to_cli(self) -> str:
        """
        Render board as text with 0-based row/col headers.
        Cell values are shown via symbol() when available.
        """
        lines = []
        lines.append("     " + " ".join(str(c) for c in range(self._size)))
        for r in range(self._size):
            row = []
            for c in range(self._size):
                v = self._grid[r, c]
                row.append(v.symbol() if hasattr(v, "symbol") else str(v))
            lines.append(f"{str(r).rjust(3)}  " + " ".join(row))
        return "\n".join(lines)
