from __future__ import annotations

import logging
from typing import Optional

from sos.core.game import Game
from sos.core.move import Move, MoveResult
from sos.core.recording import Recording

logger = logging.getLogger(__name__)


class ReplayPlayer:
    """
    Plays a saved Recording back through a Game, one move per call.

    The game is built from the recording's own mode and board size, so
    the replay ends in the same position as the original game.
    """

    def __init__(self, recording: Recording) -> None:
        self.recording = recording
        self.recording.reset_cursor()
        self.game = self.new_game()

    def new_game(self) -> Game:
        game = Game(self.recording.mode, self.recording.board_size)
        game.start()
        return game

    @property
    def finished(self) -> bool:
        return self.recording.cursor >= len(self.recording)

    def step(self) -> Optional[Move]:
        """
        Apply the next recorded move.

        Returns the move, or None once the recording is exhausted.
        """
        move = self.recording.next_move()
        if move is None:
            return None
        result: MoveResult = self.game.make_move(move.cell, move.row, move.col)
        if not result.success:
            logger.warning("Recorded move %s rejected: %s", move, result.error_message)
        return move

    def play_all(self) -> Game:
        """Apply every remaining move and return the game."""
        while self.step() is not None:
            pass
        return self.game

    def restart(self) -> None:
        """Rewind to the first move with a fresh game."""
        self.recording.reset_cursor()
        self.game = self.new_game()
