from __future__ import annotations

import logging
from typing import List, Optional

from sos.core.board import Cell
from sos.core.gamestate import Mode
from sos.core.move import Move

logger = logging.getLogger(__name__)

# codes are matched exactly; anything else is an empty cell
_CELL_CODES = {"S": Cell.S, "O": Cell.O}


class Recording:
    """
    Ordered, replayable log of the moves of one game.

    Text format (newline separated, no trailing newline):
      <mode-code>,<board_size>
      <cell-code>,<row>,<col>
      ...

    mode-code: C (classic) or S (simple)
    cell-code: S, O or empty string
    """

    def __init__(self, mode: Mode, board_size: int) -> None:
        self.mode: Mode = mode
        self.board_size: int = board_size
        self.moves: List[Move] = []
        self._cursor: int = 0

    def __len__(self) -> int:
        return len(self.moves)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recording):
            return NotImplemented
        return (
            self.mode == other.mode
            and self.board_size == other.board_size
            and self.moves == other.moves
        )

    def __repr__(self) -> str:
        return f"Recording(mode={self.mode.name}, board_size={self.board_size}, moves={len(self.moves)})"

    # -------------------------
    # Log / playback
    # -------------------------

    def add_move(self, cell: Cell, row: int, col: int) -> None:
        self.moves.append(Move(cell=cell, row=row, col=col))

    @property
    def cursor(self) -> int:
        return self._cursor

    def next_move(self) -> Optional[Move]:
        """
        Move at the cursor, advancing it by one.

        Returns None once every move has been yielded.
        """
        if self._cursor >= len(self.moves):
            return None
        move = self.moves[self._cursor]
        self._cursor += 1
        return move

    def reset_cursor(self) -> None:
        """Replay from the first move again."""
        self._cursor = 0

    # -------------------------
    # Text codec
    # -------------------------

    def serialize(self) -> str:
        lines = [f"{self.mode.code},{self.board_size}"]
        for m in self.moves:
            code = "" if m.cell == Cell.EMPTY else m.cell.symbol()
            lines.append(f"{code},{m.row},{m.col}")
        return "\n".join(lines)

    @classmethod
    def deserialize(cls, text: str) -> Optional["Recording"]:
        """
        Parse text produced by serialize().

        Returns None on any malformed header or move line; a partially
        parsed recording is never returned.
        """
        lines = text.splitlines()
        if not lines:
            return None

        header = lines[0].split(",")
        if len(header) < 2:
            return None
        board_size = _parse_index(header[1])
        if board_size is None:
            return None

        rec = cls(Mode.from_code(header[0]), board_size)

        for lineno, line in enumerate(lines[1:], start=2):
            parts = line.split(",")
            if len(parts) < 3:
                logger.debug("Malformed move on line %d: %r", lineno, line)
                return None
            row = _parse_index(parts[1])
            col = _parse_index(parts[2])
            if row is None or col is None:
                logger.debug("Malformed move on line %d: %r", lineno, line)
                return None
            rec.add_move(_CELL_CODES.get(parts[0], Cell.EMPTY), row, col)

        return rec

    # -------------------------
    # Files
    # -------------------------

    def write_to_file(self, path: str) -> None:
        """
        Write the recording to path.

        Raises:
            OSError if the file cannot be written.
        """
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(self.serialize())
        logger.info("Saved %d move(s) to %s", len(self.moves), path)

    @classmethod
    def read_from_file(cls, path: str) -> Optional["Recording"]:
        """Load a recording; None if the file is missing, unreadable or malformed."""
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read recording %s: %s", path, e)
            return None

        rec = cls.deserialize(text)
        if rec is None:
            logger.warning("Could not parse recording %s", path)
        else:
            logger.info("Loaded %d move(s) from %s", len(rec.moves), path)
        return rec


def _parse_index(text: str) -> Optional[int]:
    """Base-10 non-negative integer, or None."""
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)
