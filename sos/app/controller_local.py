from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from sos import config as defaults
from sos.ai.random_player import RandomPlayer
from sos.ai.replay_player import ReplayPlayer
from sos.app.controller_base import BaseController, ControllerEvent, EventType
from sos.cli.commands import Command, CommandProcessor, CommandType, MoveInput
from sos.cli.view import CliView, Message, MessageType
from sos.core.board import Cell
from sos.core.game import Game
from sos.core.gamestate import GameStatus, Mode, Turn
from sos.core.move import Move
from sos.core.recording import Recording

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    mode: Mode = defaults.DEFAULT_MODE
    board_size: int = defaults.DEFAULT_BOARD_SIZE
    left_cpu: bool = False
    right_cpu: bool = False
    tick_sec: float = defaults.DEFAULT_TICK_SEC
    replay_delay: float = defaults.REPLAY_DELAY_SEC
    cpu_delay: float = defaults.CPU_DELAY_SEC
    clear_screen: bool = True


class LocalController(BaseController):
    """
    Two seats on one terminal; each seat is a human or the random computer.

    Key rules:
      - /start begins a new game with the configured mode/size (not while playing).
      - /reset clears the grid and stops the game (only while playing).
      - /mode and /size configure the NEXT game, so only when not playing.
      - /save writes the current game's recording.
      - /load replays a saved game, one move per replay_delay seconds.
        Input other than /help and /quit is refused during a replay.
    """

    def __init__(
        self,
        *,
        config: GameConfig,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.cfg = config
        self.clock = clock

        # next game settings (the live game keeps its own)
        self.next_mode: Mode = self.cfg.mode
        self.next_board_size: int = self.cfg.board_size

        self.cpu_seats: Dict[Turn, bool] = {Turn.LEFT: self.cfg.left_cpu, Turn.RIGHT: self.cfg.right_cpu}
        self.selected: Dict[Turn, Cell] = {Turn.LEFT: Cell.S, Turn.RIGHT: Cell.S}
        self.cpu = RandomPlayer(rng)

        self.replay: Optional[ReplayPlayer] = None
        self._next_due: float = 0.0
        self._cpu_pending: bool = False

        game = Game(self.next_mode, self.next_board_size)
        view = CliView(seat_names=self._seat_names(), clear=self.cfg.clear_screen)
        cmd = CommandProcessor(
            board_size=self.next_board_size,
            min_size=defaults.MIN_BOARD_SIZE,
            max_size=defaults.MAX_BOARD_SIZE,
        )
        super().__init__(game=game, view=view, command_processor=cmd, tick_sec=self.cfg.tick_sec)

    # ============================================================
    # Base hooks
    # ============================================================

    def on_start(self) -> None:
        if self.replay is None:
            self.view.set_info("Type /start to begin, /help for commands.")
        self._dirty = True

    def render(self) -> None:
        self.view.render(self.game, self.selected)

    def poll_timeout(self) -> float:
        if self.replay is not None or self._cpu_to_move():
            # wake up in time for the next scheduled move
            return max(0.0, min(self.tick_sec, self._next_due - self.clock()))
        return self.tick_sec

    # ============================================================
    # External events (computer seat, replay)
    # ============================================================

    def poll_external_events(self) -> None:
        if self.clock() < self._next_due:
            return

        if self.replay is not None:
            self.push_event(ControllerEvent(EventType.REPLAY))
            return

        if self._cpu_to_move() and not self._cpu_pending:
            move = self.cpu.choose_move(self.game)
            if move is not None:
                self._cpu_pending = True
                self.push_event(ControllerEvent(EventType.CPU, move))

    def handle_event(self, event: ControllerEvent) -> None:
        if event.type == EventType.REPLAY:
            self._replay_step()
            return

        if event.type == EventType.CPU:
            self._cpu_pending = False
            move: Move = event.payload  # type: ignore[assignment]
            if not self._cpu_to_move():
                return
            self._apply(move.cell, move.row, move.col)

    # ============================================================
    # User commands
    # ============================================================

    def handle_command(self, command: Command) -> None:
        if self.replay is not None:
            self.view.set_error("Replay in progress. Only /help and /quit are available.")
            self._dirty = True
            return

        if command.type == CommandType.START:
            self._start()
        elif command.type == CommandType.RESET:
            self._reset()
        elif command.type == CommandType.SYMBOL:
            self._select_symbol(command.cell)
        elif command.type == CommandType.MODE:
            self._set_mode(command.mode)
        elif command.type == CommandType.SIZE:
            self._set_size(command.size)
        elif command.type == CommandType.SAVE:
            self._save(command.arg)
        elif command.type == CommandType.LOAD:
            self.load_replay(command.arg)
        else:
            self.view.set_error("Unknown/unsupported command. Use /help")
        self._dirty = True

    # ============================================================
    # User move
    # ============================================================

    def handle_move(self, move: MoveInput) -> None:
        self._dirty = True
        if self.replay is not None:
            self.view.set_error("Replay in progress.")
            return
        if self.game.status != GameStatus.PLAYING:
            self.view.set_error("Game is not in progress. Type /start")
            return
        if self.cpu_seats[self.game.turn]:
            self.view.set_error("Computer's turn.")
            return

        cell = move.cell if move.cell is not None else self.selected[self.game.turn]
        self._apply(cell, move.row, move.col)

    # ============================================================
    # Replay
    # ============================================================

    def load_replay(self, path: str) -> bool:
        """Load a recording and switch into replay. False if unreadable."""
        if self.game.status == GameStatus.PLAYING:
            self.view.set_error("Finish or /reset the current game before loading.")
            return False

        recording = Recording.read_from_file(path)
        if recording is None:
            self.view.set_error(f"Could not load {path}. Pick another file.")
            return False
        if not defaults.MIN_BOARD_SIZE <= recording.board_size <= defaults.MAX_BOARD_SIZE:
            logger.warning("Refusing %s: board size %d out of range", path, recording.board_size)
            self.view.set_error(
                f"{path} has board size {recording.board_size}; "
                f"only {defaults.MIN_BOARD_SIZE}..{defaults.MAX_BOARD_SIZE} can be replayed."
            )
            return False

        self.replay = ReplayPlayer(recording)
        self.game = self.replay.game
        self.cmd.board_size = self.game.board_size
        self._next_due = self.clock() + self.cfg.replay_delay
        self.view.set_message(
            Message(MessageType.REPLAY, f"{path}: {len(recording)} move(s), {recording.mode.label()}")
        )
        self._dirty = True
        return True

    def _replay_step(self) -> None:
        if self.replay is None:
            return
        turn = self.game.turn
        move = self.replay.step()
        if move is None:
            self.replay = None
            self.view.set_message(Message(MessageType.REPLAY, "Replay finished."))
            return
        self.view.set_message(Message(MessageType.MOVE, f"{turn.label()}: {move}"))
        self._next_due = self.clock() + self.cfg.replay_delay

    # ============================================================
    # Helpers
    # ============================================================

    def _seat_names(self) -> Dict[Turn, str]:
        return {t: ("CPU" if cpu else "Human") for t, cpu in self.cpu_seats.items()}

    def _cpu_to_move(self) -> bool:
        return self.game.status == GameStatus.PLAYING and self.cpu_seats[self.game.turn]

    def _apply(self, cell: Cell, row: int, col: int) -> None:
        turn = self.game.turn
        result = self.game.make_move(cell, row, col)
        if not result.success:
            self.view.set_error(result.error_message)
            return

        if result.scored:
            text = f"{turn.label()} made {result.sos_count} SOS"
            if not self.game.is_game_over():
                text += " and moves again"
            self.view.set_message(Message(MessageType.SOS, text))
        else:
            self.view.set_message(Message(MessageType.MOVE, f"{turn.label()}: {cell.symbol()} at ({row}, {col})"))
        self._next_due = self.clock() + self.cfg.cpu_delay

    def _start(self) -> None:
        if self.game.status == GameStatus.PLAYING:
            self.view.set_error("A game is already in progress. Use /reset first.")
            return
        self.game = Game(self.next_mode, self.next_board_size)
        self.game.start()
        self.cmd.board_size = self.next_board_size
        self._cpu_pending = False
        self._next_due = self.clock() + self.cfg.cpu_delay
        self.view.set_message(
            Message(MessageType.START, f"{self.next_mode.label()} game on {self.next_board_size}x{self.next_board_size}")
        )

    def _reset(self) -> None:
        if self.game.status != GameStatus.PLAYING:
            self.view.set_error("No game in progress.")
            return
        self.game.clear_grid()
        self.game.status = GameStatus.NOT_STARTED
        self._cpu_pending = False
        self.view.set_message(Message(MessageType.RESET, "Grid cleared. Type /start for a new game."))

    def _select_symbol(self, cell: Optional[Cell]) -> None:
        if cell is None or cell == Cell.EMPTY:
            self.view.set_error("Use /s or /o")
            return
        turn = self.game.turn
        self.selected[turn] = cell
        self.view.set_info(f"{turn.label()} places {cell.symbol()}")

    def _set_mode(self, mode: Optional[Mode]) -> None:
        if self.game.status == GameStatus.PLAYING:
            self.view.set_error("Mode can only change between games.")
            return
        if mode is None:
            self.view.set_error("Usage: /mode classic|simple")
            return
        self.next_mode = mode
        self.view.set_info(f"Next game: {mode.label()}")

    def _set_size(self, size: Optional[int]) -> None:
        if self.game.status == GameStatus.PLAYING:
            self.view.set_error("Board size can only change between games.")
            return
        if size is None:
            self.view.set_error("Usage: /size N")
            return
        self.next_board_size = size
        self.view.set_info(f"Next game: {size}x{size}")

    def _save(self, path: str) -> None:
        try:
            self.game.recording.write_to_file(path)
        except OSError as e:
            logger.error("Save to %s failed: %s", path, e)
            self.view.set_error(f"Could not save to {path}: {e}")
            return
        self.view.set_message(Message(MessageType.SAVE, f"Saved {len(self.game.recording)} move(s) to {path}"))
