from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sos.core.board import Cell
from sos.core.gamestate import Mode


class CommandType(Enum):
    QUIT = "quit"
    HELP = "help"
    START = "start"
    RESET = "reset"
    SYMBOL = "symbol"      # /s, /o
    MODE = "mode"          # /mode classic|simple
    SIZE = "size"          # /size N
    SAVE = "save"          # /save PATH
    LOAD = "load"          # /load PATH (replay)


@dataclass(frozen=True)
class Command:
    """Parsed command from user input."""
    type: CommandType
    raw: str
    arg: str = ""
    cell: Optional[Cell] = None
    mode: Optional[Mode] = None
    size: Optional[int] = None


@dataclass(frozen=True)
class MoveInput:
    """
    A cell placement typed by the user.
    cell is None when the player's selected letter should be used.
    """
    row: int
    col: int
    cell: Optional[Cell] = None


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing one line input.
    Exactly one of (command, move) should be set on success.
    """
    command: Optional[Command] = None
    move: Optional[MoveInput] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.error == "" and (self.command is not None or self.move is not None)


class CommandProcessor:
    """
    Parses user input line into:
      - Command (e.g. /start, /save game.txt)
      - MoveInput (e.g. '2 3' or '2 3 O')

    This class does NOT execute anything. Controllers decide what to do.
    """

    def __init__(self, board_size: int, *, min_size: int, max_size: int) -> None:
        if board_size <= 0:
            raise ValueError("board_size must be positive")
        self.board_size = board_size
        self.min_size = min_size
        self.max_size = max_size

    @property
    def help_cmds(self) -> str:
        cmds = ["/help", "/quit", "/start", "/reset", "/s", "/o",
                "/mode classic|simple", f"/size {self.min_size}-{self.max_size}",
                "/save FILE", "/load FILE"]
        return ", ".join(cmds)

    def help_text(self) -> str:
        last = self.board_size - 1
        return (
            f"Input: 'row col' or 'row col S|O' (0-{last}, e.g. 1 2 O).\n"
            f"Commands: {self.help_cmds}"
        )

    # ---------- Public parse API ----------

    def parse(self, text: str) -> ParseResult:
        """
        Parse a raw input line.
        Returns ParseResult with either command or move on success.
        """
        raw = (text or "").strip()
        if not raw:
            return ParseResult(error="")  # treat as no-op line

        if raw.startswith("/"):
            return self._parse_command(raw)

        # move: "row col" or "row col S|O"
        parts = raw.split()
        if len(parts) in (2, 3) and parts[0].isdigit() and parts[1].isdigit():
            row, col = int(parts[0]), int(parts[1])
            if not self._is_in_bounds(row, col):
                return ParseResult(error=self._oob_msg(row, col))
            cell = None
            if len(parts) == 3:
                cell = Cell.from_symbol(parts[2])
                if cell == Cell.EMPTY:
                    return ParseResult(error=f"Unknown letter: {parts[2]} (use S or O)")
            return ParseResult(move=MoveInput(row, col, cell))

        return ParseResult(error="Invalid input. Use 'row col [S|O]' or /help")

    # ---------- Helpers ----------

    def _parse_command(self, raw: str) -> ParseResult:
        name, _, arg = raw[1:].strip().partition(" ")
        name = name.lower()
        arg = arg.strip()

        if name == "quit":
            return ParseResult(command=Command(CommandType.QUIT, raw))
        if name == "help":
            return ParseResult(command=Command(CommandType.HELP, raw))
        if name == "start":
            return ParseResult(command=Command(CommandType.START, raw))
        if name == "reset":
            return ParseResult(command=Command(CommandType.RESET, raw))
        if name in ("s", "o"):
            return ParseResult(command=Command(CommandType.SYMBOL, raw, cell=Cell.from_symbol(name)))

        if name == "mode":
            lowered = arg.lower()
            if lowered in ("classic", "c"):
                return ParseResult(command=Command(CommandType.MODE, raw, arg, mode=Mode.CLASSIC))
            if lowered in ("simple", "s"):
                return ParseResult(command=Command(CommandType.MODE, raw, arg, mode=Mode.SIMPLE))
            return ParseResult(error="Usage: /mode classic|simple")

        if name == "size":
            if not arg.isdigit():
                return ParseResult(error=f"Usage: /size {self.min_size}-{self.max_size}")
            size = int(arg)
            if not self.min_size <= size <= self.max_size:
                return ParseResult(error=f"Board size must be {self.min_size}..{self.max_size}")
            return ParseResult(command=Command(CommandType.SIZE, raw, arg, size=size))

        if name in ("save", "load"):
            if not arg:
                return ParseResult(error=f"Usage: /{name} FILE")
            ctype = CommandType.SAVE if name == "save" else CommandType.LOAD
            return ParseResult(command=Command(ctype, raw, arg))

        return ParseResult(error=f"Unknown command: {raw}")

    def _is_in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.board_size and 0 <= col < self.board_size

    def _oob_msg(self, row: int, col: int) -> str:
        return f"Out of bounds: {row}, {col} (must be 0..{self.board_size - 1})"
