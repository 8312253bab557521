from sos.core.gamestate import Mode


# Board size limits (inclusive), as offered by the size selector
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 10
DEFAULT_BOARD_SIZE = 5
DEFAULT_MODE = Mode.CLASSIC
# Seconds between replayed moves
REPLAY_DELAY_SEC = 1.0
# Input polling tick for the interactive loop
DEFAULT_TICK_SEC = 1.0
# Pause before a computer seat moves, so its moves can be followed
CPU_DELAY_SEC = 0.5
