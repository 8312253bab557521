from sos.core.board import Board, Cell, OutOfBoundsError
from sos.core.game import Game
from sos.core.gamestate import GameState, GameStatus, Mode, Turn
from sos.core.move import Move, MoveResult
from sos.core.recording import Recording

__all__ = [
    "Board",
    "Cell",
    "OutOfBoundsError",
    "Game",
    "GameState",
    "GameStatus",
    "Mode",
    "Turn",
    "Move",
    "MoveResult",
    "Recording",
]
