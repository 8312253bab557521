from __future__ import annotations

from sos.core.gamestate import GameStatus, Mode


def _compare_scores(left_score: int, right_score: int) -> GameStatus:
    if left_score > right_score:
        return GameStatus.LEFT_WIN
    if right_score > left_score:
        return GameStatus.RIGHT_WIN
    return GameStatus.DRAW


def classic_status(left_score: int, right_score: int, board_full: bool) -> GameStatus:
    """Game only ends once every cell is filled; then the higher score wins."""
    if not board_full:
        return GameStatus.PLAYING
    return _compare_scores(left_score, right_score)


def simple_status(left_score: int, right_score: int, board_full: bool) -> GameStatus:
    """First player ahead on score wins at once; a full tied board is a draw."""
    if left_score != right_score or board_full:
        return _compare_scores(left_score, right_score)
    return GameStatus.PLAYING


def evaluate(mode: Mode, left_score: int, right_score: int, board_full: bool) -> GameStatus:
    """
    Derive game status for the given rule variant.

    Both variants are pure functions of the scores and board fullness.
    """
    if mode == Mode.SIMPLE:
        return simple_status(left_score, right_score, board_full)
    return classic_status(left_score, right_score, board_full)
