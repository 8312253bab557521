# game.py
from __future__ import annotations

import logging
from typing import List, Tuple

from sos.core.board import Board, Cell
from sos.core.gamestate import GameState, GameStatus, Mode, Turn
from sos.core.move import MoveResult
from sos.core.patterns import count_sos
from sos.core.recording import Recording
from sos.core import wincondition

logger = logging.getLogger(__name__)


class Game:
    """
    Main game engine.

    Owns:
      - Board
      - Recording of every accepted move
      - Current state fields (turn, scores, cells filled, status)

    Note:
      - A move that completes at least one S-O-S keeps the turn with the
        same player; otherwise the turn passes.
      - Illegal moves are inert: nothing changes and nothing is recorded.
      - Mode (and so the win condition) is fixed at construction.
    """

    def __init__(self, mode: Mode = Mode.CLASSIC, board_size: int = 5) -> None:
        """
        Initialize game.

        Args:
            mode: Rule variant deciding when the game ends (default: CLASSIC)
            board_size: Rows/columns of the square board (default: 5)
        """
        self.board = Board(board_size, Cell.EMPTY)
        self._mode: Mode = mode

        # Game state
        self.turn: Turn = Turn.LEFT
        self.left_score: int = 0
        self.right_score: int = 0
        self.cells_filled: int = 0
        self.status: GameStatus = GameStatus.NOT_STARTED

        self.recording = Recording(mode, board_size)

    # -------------------------
    # State helpers
    # -------------------------

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def board_size(self) -> int:
        return self.board.size

    def get_state(self) -> GameState:
        """Get current game state."""
        return GameState(
            mode=self._mode,
            board_size=self.board.size,
            turn=self.turn,
            status=self.status,
            left_score=self.left_score,
            right_score=self.right_score,
            cells_filled=self.cells_filled,
        )

    def is_board_full(self) -> bool:
        return self.cells_filled == self.board.size ** 2

    def is_game_over(self) -> bool:
        return self.status.is_terminal()

    def start(self) -> None:
        """
        Begin accepting moves.

        Not guarded against a second call; starting twice is a caller bug.
        """
        self.status = GameStatus.PLAYING
        logger.debug("Game started: mode=%s size=%d", self._mode.name, self.board.size)

    # -------------------------
    # Cells
    # -------------------------

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Raises:
            OutOfBoundsError if (row, col) is not on the board.
        """
        return self.board.get(row, col)

    def empty_positions(self) -> List[Tuple[int, int]]:
        return self.board.empty_positions(Cell.EMPTY)

    def clear_grid(self) -> None:
        """Empty every cell. Scores, turn, status and recording are kept."""
        self.board.reset(Cell.EMPTY)

    # -------------------------
    # Move
    # -------------------------

    def make_move(self, cell: Cell, row: int, col: int) -> MoveResult:
        """
        Place `cell` at (row, col) for the current player.

        Returns:
            MoveResult (success, sos_count, error_message). A failed result
            means the game was left untouched.
        """
        if self.status != GameStatus.PLAYING:
            return self._reject(row, col, "Game is not in progress.")
        if not self.board.in_bounds(row, col):
            return self._reject(row, col, "Move is out of bounds.")
        if self.board.get(row, col) != Cell.EMPTY:
            return self._reject(row, col, "Cell is already occupied.")

        # apply
        self.board.set(row, col, cell)
        self.cells_filled += 1

        # score
        made = count_sos(self.board, row, col)
        if self.turn == Turn.LEFT:
            self.left_score += made
        else:
            self.right_score += made

        self.recording.add_move(cell, row, col)

        # end?
        previous = self.status
        self.status = wincondition.evaluate(
            self._mode, self.left_score, self.right_score, self.is_board_full()
        )

        logger.debug(
            "%s played %s at (%d, %d): sos=%d score=%d-%d",
            self.turn.name, cell.symbol(), row, col, made, self.left_score, self.right_score,
        )
        if self.status != previous:
            logger.debug("Status %s -> %s", previous.name, self.status.name)

        # next turn (scoring earns another move)
        if made == 0:
            self.switch_turn()
        return MoveResult.ok(sos_count=made)

    def switch_turn(self) -> None:
        """Switch to next player."""
        self.turn = self.turn.opponent()

    def _reject(self, row: int, col: int, msg: str) -> MoveResult:
        logger.debug("Rejected move at (%d, %d): %s", row, col, msg)
        return MoveResult.fail(msg)
