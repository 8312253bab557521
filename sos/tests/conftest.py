"""
Pytest fixtures for SOS tests.
"""

import pytest

from ..core.board import Cell
from ..core.game import Game
from ..core.gamestate import Mode


def play(game: Game, moves):
    """Apply (cell, row, col) moves in order; returns the MoveResults."""
    return [game.make_move(cell, row, col) for cell, row, col in moves]


@pytest.fixture
def classic_game() -> Game:
    """A started 3x3 classic game."""
    game = Game(Mode.CLASSIC, 3)
    game.start()
    return game


@pytest.fixture
def simple_game() -> Game:
    """A started 10x10 simple game."""
    game = Game(Mode.SIMPLE, 10)
    game.start()
    return game


@pytest.fixture
def left_win_moves():
    """Fills a 3x3 board; Left completes the column-0 S-O-S and leads 1-0."""
    return [
        (Cell.S, 0, 0),
        (Cell.O, 1, 0),
        (Cell.S, 2, 0),
        (Cell.O, 0, 1),
        (Cell.S, 1, 1),
        (Cell.S, 2, 1),
        (Cell.O, 0, 2),
        (Cell.S, 1, 2),
        (Cell.S, 2, 2),
    ]
