"""
Tests for move recording, replay cursor and the text format.
"""

import pytest

from ..core.board import Cell
from ..core.game import Game
from ..core.gamestate import Mode
from ..core.move import Move
from ..core.recording import Recording
from .conftest import play


def sample() -> Recording:
    rec = Recording(Mode.SIMPLE, 4)
    rec.add_move(Cell.S, 1, 2)
    rec.add_move(Cell.O, 3, 0)
    return rec


class TestLog:
    def test_add_move_appends(self):
        rec = Recording(Mode.SIMPLE, 5)
        rec.add_move(Cell.S, 1, 1)
        assert rec.moves == [Move(Cell.S, 1, 1)]

    def test_next_move_in_order_then_exhausted(self):
        rec = sample()
        assert rec.next_move() == Move(Cell.S, 1, 2)
        assert rec.next_move() == Move(Cell.O, 3, 0)
        assert rec.next_move() is None
        assert rec.next_move() is None

    def test_next_move_on_empty(self):
        assert Recording(Mode.CLASSIC, 3).next_move() is None

    def test_reset_cursor_replays_from_start(self):
        rec = sample()
        rec.next_move()
        rec.next_move()
        rec.reset_cursor()
        assert rec.cursor == 0
        assert rec.next_move() == Move(Cell.S, 1, 2)
        assert len(rec) == 2


class TestSerialize:
    def test_format(self):
        assert sample().serialize() == "S,4\nS,1,2\nO,3,0"

    def test_classic_header_only(self):
        assert Recording(Mode.CLASSIC, 7).serialize() == "C,7"

    def test_empty_cell_code(self):
        rec = Recording(Mode.CLASSIC, 3)
        rec.add_move(Cell.EMPTY, 0, 0)
        assert rec.serialize() == "C,3\n,0,0"


class TestDeserialize:
    def test_round_trip(self):
        rec = sample()
        assert Recording.deserialize(rec.serialize()) == rec

    def test_round_trip_of_played_game(self, classic_game, left_win_moves):
        play(classic_game, left_win_moves)
        parsed = Recording.deserialize(classic_game.recording.serialize())
        assert parsed.mode == Mode.CLASSIC
        assert parsed.board_size == 3
        assert parsed.moves == classic_game.recording.moves

    def test_crlf(self):
        rec = Recording.deserialize("S,4\r\nS,1,2\r\nO,3,0\r\n")
        assert rec == sample()

    def test_unknown_mode_is_classic(self):
        assert Recording.deserialize("X,5").mode == Mode.CLASSIC

    def test_unknown_cell_is_empty(self):
        rec = Recording.deserialize("C,5\nQ,1,1")
        assert rec.moves == [Move(Cell.EMPTY, 1, 1)]

    def test_cell_codes_are_case_sensitive(self):
        rec = Recording.deserialize("C,5\ns,1,1\no,2,2")
        assert rec.moves == [Move(Cell.EMPTY, 1, 1), Move(Cell.EMPTY, 2, 2)]

    def test_padded_cell_code_is_empty(self):
        rec = Recording.deserialize("C,5\n O,1,1")
        assert rec.moves[0].cell == Cell.EMPTY

    def test_padded_or_lowercase_mode_is_classic(self):
        assert Recording.deserialize(" S,5").mode == Mode.CLASSIC
        assert Recording.deserialize("s,5").mode == Mode.CLASSIC

    def test_bad_board_size(self):
        assert Recording.deserialize("C,five\nS,1,1") is None

    def test_bad_row_aborts_whole_parse(self):
        assert Recording.deserialize("C,5\nS,1,1\nO,x,2") is None

    def test_bad_col(self):
        assert Recording.deserialize("C,5\nS,1,-2") is None

    def test_short_line(self):
        assert Recording.deserialize("C,5\nS,1") is None

    def test_empty_text(self):
        assert Recording.deserialize("") is None


class TestFiles:
    def test_write_then_read(self, tmp_path):
        path = tmp_path / "game.txt"
        rec = sample()
        rec.write_to_file(str(path))
        assert path.read_text() == rec.serialize()
        assert Recording.read_from_file(str(path)) == rec

    def test_missing_file(self, tmp_path):
        assert Recording.read_from_file(str(tmp_path / "this_file_does_not_exist")) is None

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("C,3\nS,a,b")
        assert Recording.read_from_file(str(path)) is None

    def test_write_failure_propagates(self, tmp_path):
        with pytest.raises(OSError):
            sample().write_to_file(str(tmp_path / "missing_dir" / "game.txt"))


class TestReplayThroughGame:
    def test_replay_reconstructs_game(self, classic_game, left_win_moves):
        play(classic_game, left_win_moves)
        rec = Recording.deserialize(classic_game.recording.serialize())

        replayed = Game(rec.mode, rec.board_size)
        replayed.start()
        move = rec.next_move()
        while move is not None:
            replayed.make_move(move.cell, move.row, move.col)
            move = rec.next_move()

        assert replayed.board == classic_game.board
        assert replayed.get_state() == classic_game.get_state()
