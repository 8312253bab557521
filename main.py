from __future__ import annotations

import argparse

from sos import config
from sos.app.controller_local import GameConfig, LocalController
from sos.core.gamestate import Mode
from sos.utils.logging_config import setup_logging


MODES = {"classic": Mode.CLASSIC, "simple": Mode.SIMPLE}


def run_play(mode: str, size: int, left: str, right: str, tick: float) -> None:
    cfg = GameConfig(
        mode=MODES[mode],
        board_size=size,
        left_cpu=(left == "cpu"),
        right_cpu=(right == "cpu"),
        tick_sec=tick,
    )
    ctrl = LocalController(config=cfg)
    ctrl.run()


def run_replay(path: str, delay: float) -> None:
    cfg = GameConfig(replay_delay=delay)
    ctrl = LocalController(config=cfg)
    if not ctrl.load_replay(path):
        raise SystemExit(f"Could not load recording: {path}")
    ctrl.run()


def board_size(text: str) -> int:
    size = int(text)
    if not config.MIN_BOARD_SIZE <= size <= config.MAX_BOARD_SIZE:
        raise argparse.ArgumentTypeError(
            f"board size must be {config.MIN_BOARD_SIZE}..{config.MAX_BOARD_SIZE}"
        )
    return size


def main():
    ap = argparse.ArgumentParser(description="SOS: complete S-O-S lines to score.")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = ap.add_subparsers(dest="command", required=True)

    ap_play = sub.add_parser("play")
    ap_play.add_argument("--mode", choices=sorted(MODES), default="classic")
    ap_play.add_argument("--size", type=board_size, default=config.DEFAULT_BOARD_SIZE)
    ap_play.add_argument("--left", choices=["human", "cpu"], default="human")
    ap_play.add_argument("--right", choices=["human", "cpu"], default="human")
    ap_play.add_argument("--tick", type=float, default=config.DEFAULT_TICK_SEC)

    ap_replay = sub.add_parser("replay")
    ap_replay.add_argument("file")
    ap_replay.add_argument(
        "--delay",
        type=float,
        default=config.REPLAY_DELAY_SEC,
        help="Seconds between replayed moves",
    )

    args = ap.parse_args()
    setup_logging(args.log_level)

    if args.command == "play":
        run_play(args.mode, args.size, args.left, args.right, args.tick)
    else:
        run_replay(args.file, args.delay)


if __name__ == "__main__":
    main()
