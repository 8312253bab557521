"""
Tests for the computer and replay players.
"""

import random

from ..ai.random_player import RandomPlayer
from ..ai.replay_player import ReplayPlayer
from ..core.board import Cell
from ..core.game import Game
from ..core.gamestate import GameStatus, Mode
from .conftest import play


class TestRandomPlayer:
    def test_no_move_before_start(self):
        game = Game(Mode.CLASSIC, 3)
        assert RandomPlayer(random.Random(1)).choose_move(game) is None

    def test_picks_empty_cell_and_letter(self, classic_game):
        play(classic_game, [(Cell.S, 0, 0), (Cell.O, 1, 1)])
        player = RandomPlayer(random.Random(7))
        for _ in range(50):
            move = player.choose_move(classic_game)
            assert (move.row, move.col) in classic_game.empty_positions()
            assert move.cell in (Cell.S, Cell.O)

    def test_plays_classic_game_to_the_end(self):
        game = Game(Mode.CLASSIC, 4)
        game.start()
        player = RandomPlayer(random.Random(3))
        while player.play(game) is not None:
            pass
        assert game.is_board_full()
        assert game.status.is_terminal()
        assert len(game.recording) == 16

    def test_stops_when_game_over(self, simple_game):
        play(simple_game, [(Cell.S, 0, 0), (Cell.O, 0, 1), (Cell.S, 0, 2)])
        assert simple_game.status == GameStatus.LEFT_WIN
        assert RandomPlayer(random.Random(0)).play(simple_game) is None


class TestReplayPlayer:
    def test_replays_every_move(self, classic_game, left_win_moves):
        play(classic_game, left_win_moves)
        replay = ReplayPlayer(classic_game.recording)

        steps = 0
        while replay.step() is not None:
            steps += 1
        assert steps == 9
        assert replay.finished
        assert replay.game.board == classic_game.board
        assert replay.game.status == GameStatus.LEFT_WIN

    def test_restart(self, classic_game, left_win_moves):
        play(classic_game, left_win_moves)
        replay = ReplayPlayer(classic_game.recording)
        replay.play_all()
        replay.restart()
        assert replay.game.cells_filled == 0
        assert replay.game.status == GameStatus.PLAYING
        assert replay.play_all().get_state() == classic_game.get_state()
