from __future__ import annotations

import random
from typing import Optional

from sos.core.board import Cell
from sos.core.game import Game
from sos.core.gamestate import GameStatus
from sos.core.move import Move


class RandomPlayer:
    """
    Computer seat: any empty cell, either letter, uniformly at random.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def choose_move(self, game: Game) -> Optional[Move]:
        """
        Pick a move for the current position.

        Returns None when the game is not in progress or the board is full.
        """
        if game.status != GameStatus.PLAYING:
            return None
        candidates = game.empty_positions()
        if not candidates:
            return None
        row, col = self.rng.choice(candidates)
        cell = self.rng.choice((Cell.S, Cell.O))
        return Move(cell=cell, row=row, col=col)

    def play(self, game: Game) -> Optional[Move]:
        """Choose and apply a move; returns the move played, if any."""
        move = self.choose_move(game)
        if move is None:
            return None
        game.make_move(move.cell, move.row, move.col)
        return move
