from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    """Rule variant, fixed for the life of a game."""
    CLASSIC = "C"
    SIMPLE = "S"

    @property
    def code(self) -> str:
        return self.value

    @staticmethod
    def from_code(code: str) -> "Mode":
        # unknown codes fall back to classic
        return Mode.SIMPLE if code == Mode.SIMPLE.value else Mode.CLASSIC

    def label(self) -> str:
        return self.name.capitalize()


class Turn(Enum):
    LEFT = "left"
    RIGHT = "right"

    def opponent(self) -> "Turn":
        return Turn.RIGHT if self == Turn.LEFT else Turn.LEFT

    def label(self) -> str:
        return "Player 1" if self == Turn.LEFT else "Player 2"


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    LEFT_WIN = "left_win"
    RIGHT_WIN = "right_win"
    DRAW = "draw"

    def is_terminal(self) -> bool:
        return self in (GameStatus.LEFT_WIN, GameStatus.RIGHT_WIN, GameStatus.DRAW)


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of a game for renderers."""
    mode: Mode
    board_size: int
    turn: Turn
    status: GameStatus
    left_score: int = 0
    right_score: int = 0
    cells_filled: int = 0

    def is_game_over(self) -> bool:
        return self.status.is_terminal()
