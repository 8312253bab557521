from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from sos.core.board import Cell
from sos.core.game import Game
from sos.core.gamestate import GameStatus, Turn


# =========================
# Message types
# =========================

class MessageType(Enum):
    ERR = "ERR"
    INFO = "INFO"
    MOVE = "MOVE"
    SOS = "SOS"
    START = "START"
    RESET = "RESET"
    SAVE = "SAVE"
    REPLAY = "REPLAY"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Message:
    """
    A UI message shown between board and state.
    Examples:
      [ERR] Invalid input
      [SOS] Player 1 scored 2
    """
    type: MessageType
    text: str = ""

    def render(self) -> str:
        if self.text:
            return f"[{self.type.value}] {self.text}"
        return f"[{self.type.value}]"


# =========================
# Screen utils
# =========================

def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


# =========================
# View (board + message + state)
# =========================

class CliView:
    """
    Responsible ONLY for rendering:
      1) board
      2) message
      3) score / turn / status lines

    It does NOT parse input or execute game logic.
    """

    def __init__(self, *, seat_names: Dict[Turn, str], prompt: str = "> ", clear: bool = True) -> None:
        self.seat_names = seat_names
        self.prompt = prompt
        self.clear = clear

        self._message: Optional[Message] = None

    # ---------- Message API ----------

    @property
    def message(self) -> Optional[Message]:
        return self._message

    def set_message(self, msg: Optional[Message]) -> None:
        self._message = msg

    def set_error(self, text: str) -> None:
        self._message = Message(MessageType.ERR, text)

    def set_info(self, text: str = "") -> None:
        self._message = Message(MessageType.INFO, text) if text else None

    # ---------- Render ----------

    def render(self, game: Game, selected: Dict[Turn, Cell], *, show_prompt: bool = True) -> None:
        if self.clear:
            clear_screen()

        # 1) board
        print(game.board.to_cli())
        print("")

        # 2) message
        print(self._message.render() if self._message is not None else "")

        # 3) state
        print(self.build_score_line(game, selected))
        print(self.build_status_line(game))
        if show_prompt:
            print(self.prompt, end="", flush=True)

    def build_score_line(self, game: Game, selected: Dict[Turn, Cell]) -> str:
        parts = []
        for turn, score in ((Turn.LEFT, game.left_score), (Turn.RIGHT, game.right_score)):
            parts.append(
                f"{turn.label()} ({self.seat_names[turn]}) [{selected[turn].symbol()}]: {score}"
            )
        return f"{game.mode.label()}   " + "   ".join(parts)

    def build_status_line(self, game: Game) -> str:
        status = game.status
        if status == GameStatus.PLAYING:
            return f">>> Turn: {game.turn.label()} <<<"
        if status == GameStatus.LEFT_WIN:
            return "☆ Left Player Wins! ☆"
        if status == GameStatus.RIGHT_WIN:
            return "☆ Right Player Wins! ☆"
        if status == GameStatus.DRAW:
            return "Tie Game"
        return "Not started. Type /start"
