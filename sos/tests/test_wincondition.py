"""
Tests for the Classic / Simple end-of-game rules.
"""

import pytest

from ..core.gamestate import GameStatus, Mode
from ..core.wincondition import classic_status, evaluate, simple_status


class TestClassic:
    @pytest.mark.parametrize("left,right", [(0, 0), (5, 0), (0, 3)])
    def test_playing_until_full(self, left, right):
        """Score skew never ends a classic game early."""
        assert classic_status(left, right, board_full=False) == GameStatus.PLAYING

    @pytest.mark.parametrize("left,right,expected", [
        (2, 1, GameStatus.LEFT_WIN),
        (0, 1, GameStatus.RIGHT_WIN),
        (2, 2, GameStatus.DRAW),
    ])
    def test_full_board_compares_scores(self, left, right, expected):
        assert classic_status(left, right, board_full=True) == expected


class TestSimple:
    @pytest.mark.parametrize("full", [False, True])
    def test_lead_wins_immediately(self, full):
        assert simple_status(1, 0, board_full=full) == GameStatus.LEFT_WIN
        assert simple_status(0, 2, board_full=full) == GameStatus.RIGHT_WIN

    def test_tie_keeps_playing(self):
        assert simple_status(1, 1, board_full=False) == GameStatus.PLAYING

    def test_full_tie_is_draw(self):
        assert simple_status(0, 0, board_full=True) == GameStatus.DRAW


class TestDispatch:
    def test_mode_selects_rule(self):
        assert evaluate(Mode.CLASSIC, 1, 0, False) == GameStatus.PLAYING
        assert evaluate(Mode.SIMPLE, 1, 0, False) == GameStatus.LEFT_WIN
