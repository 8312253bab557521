from __future__ import annotations
from dataclasses import dataclass
from sos.core.board import Cell

@dataclass(frozen=True)
class Move:
    """One placed symbol: what, and where."""
    cell: Cell
    row: int
    col: int

    def __str__(self) -> str:
        """String representation."""
        return f"{self.cell.symbol()} at ({self.row}, {self.col})"

@dataclass
class MoveResult:
    """Result of executing a move."""
    success: bool
    sos_count: int = 0
    error_message: str = ""

    @property
    def scored(self) -> bool:
        return self.sos_count > 0

    @staticmethod
    def ok(*, sos_count: int = 0) -> "MoveResult":
        return MoveResult(
            success=True,
            sos_count=sos_count,
            error_message="",
        )

    @staticmethod
    def fail(msg: str) -> "MoveResult":
        return MoveResult(
            success=False,
            sos_count=0,
            error_message=msg,
        )
