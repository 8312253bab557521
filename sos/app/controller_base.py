from __future__ import annotations

import os
import queue
import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from sos.cli.commands import Command, CommandProcessor, CommandType, MoveInput
from sos.cli.view import CliView, Message, MessageType
from sos.core.game import Game


# =========================
# Non-blocking input (tick polling)
# =========================

class InputPoller:
    """
    Line input that gives up after a timeout, so the loop can keep
    replaying or letting the computer move while the user is idle.
    - Windows: msvcrt (character polling)
    - Unix: select
    """
    def __init__(self) -> None:
        self._buf: List[str] = []
        self._is_windows = (os.name == "nt")
        if self._is_windows:
            import msvcrt  # type: ignore
            self._msvcrt = msvcrt
        else:
            import select
            self._select = select

    def poll_line(self, timeout_sec: float = 1.0) -> Optional[str]:
        if not self._is_windows:
            ready, _, _ = self._select.select([sys.stdin], [], [], timeout_sec)
            if not ready:
                return None
            line = sys.stdin.readline()
            if line == "":
                # stdin closed
                return "/quit"
            return line.strip()

        deadline = time.monotonic() + timeout_sec
        while time.monotonic() < deadline:
            if not self._msvcrt.kbhit():
                time.sleep(0.02)
                continue
            ch = self._msvcrt.getwch()
            if ch in ("\r", "\n"):
                line = "".join(self._buf)
                self._buf.clear()
                sys.stdout.write("\n")
                sys.stdout.flush()
                return line.strip()
            if ch == "\b":
                if self._buf:
                    self._buf.pop()
                    sys.stdout.write("\b \b")
                    sys.stdout.flush()
            else:
                self._buf.append(ch)
                sys.stdout.write(ch)
                sys.stdout.flush()
        return None


# =========================
# Events (controller internal)
# =========================

class EventType(Enum):
    CPU = "cpu"            # computer seat move
    REPLAY = "replay"      # next recorded move


@dataclass(frozen=True)
class ControllerEvent:
    type: EventType
    payload: object = None


# =========================
# Base Controller
# =========================

class BaseController(ABC):
    """
    Common controller loop:
      - poll external events (computer seat, replay)
      - poll user input (tick)
      - parse input into Command/MoveInput
      - pump events + handle input
      - render(board + message + state)

    Controller orchestrates. Game handles gameplay. View renders only.
    CommandProcessor parses only.
    """

    def __init__(
        self,
        *,
        game: Game,
        view: CliView,
        command_processor: CommandProcessor,
        tick_sec: float = 1.0,
    ) -> None:
        self.game = game
        self.view = view
        self.cmd = command_processor
        self.tick_sec = tick_sec

        self._input: Optional[InputPoller] = None
        self._running = True
        self._events: "queue.Queue[ControllerEvent]" = queue.Queue()
        self._dirty = True

    def push_event(self, event: ControllerEvent) -> None:
        self._events.put(event)

    # ---------- Main loop ----------

    def run(self) -> None:
        self._input = InputPoller()
        self.on_start()
        self._dirty = True
        self._render()

        while self._running:
            self.poll_external_events()
            self._pump_events()

            if self._dirty:
                self._render()

            line = self._input.poll_line(timeout_sec=self.poll_timeout())
            if line is None:
                continue
            self.handle_line(line)

        self.on_stop()

    def handle_line(self, line: str) -> None:
        """Parse one input line and dispatch it."""
        parsed = self.cmd.parse(line)
        if not parsed.ok:
            # empty input is ok-noop
            if parsed.error:
                self.view.set_error(parsed.error)
                self._dirty = True
            return

        if parsed.command is not None:
            self._handle_command(parsed.command)
        elif parsed.move is not None:
            self.handle_move(parsed.move)

    def poll_timeout(self) -> float:
        return self.tick_sec

    # ---------- Rendering ----------

    def _render(self) -> None:
        if not self._dirty:
            return
        self.render()
        self._dirty = False

    # ---------- Event pumping ----------

    def _pump_events(self) -> None:
        while True:
            try:
                ev = self._events.get_nowait()
            except queue.Empty:
                return
            self.handle_event(ev)
            self._dirty = True

    # ---------- Input dispatch ----------

    def _handle_command(self, command: Command) -> None:
        if command.type == CommandType.HELP:
            self.view.set_info(self.cmd.help_text())
            self._dirty = True
            return

        if command.type == CommandType.QUIT:
            self.view.set_message(Message(MessageType.QUIT, "Exiting..."))
            self._running = False
            return

        self.handle_command(command)

    # =========================
    # Hooks / Abstract methods
    # =========================

    def stop(self) -> None:
        self._running = False

    def on_start(self) -> None:
        """Optional hook before loop starts."""
        pass

    def on_stop(self) -> None:
        """Optional hook after loop ends."""
        pass

    @abstractmethod
    def render(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def poll_external_events(self) -> None:
        """Push due CPU/replay events via self.push_event(...)."""
        raise NotImplementedError

    @abstractmethod
    def handle_event(self, event: ControllerEvent) -> None:
        raise NotImplementedError

    @abstractmethod
    def handle_command(self, command: Command) -> None:
        """Handle commands except /help and /quit (already processed)."""
        raise NotImplementedError

    @abstractmethod
    def handle_move(self, move: MoveInput) -> None:
        raise NotImplementedError
