"""
Tests for S-O-S line detection around a placed cell.
"""

import pytest

from ..core.board import Board, Cell
from ..core.patterns import DIRECTIONS, count_sos


def board_from(rows):
    """Build a board from strings like 'S.O' ('.' is empty)."""
    board = Board(len(rows))
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch != ".":
                board.set(r, c, Cell.from_symbol(ch))
    return board


class TestPlacedO:
    @pytest.mark.parametrize("rows,row,col", [
        (["S..", "O..", "S.."], 1, 0),   # vertical
        (["SOS", "...", "..."], 0, 1),   # horizontal
    ])
    def test_middle_of_line_scores(self, rows, row, col):
        board = board_from(rows)
        assert count_sos(board, row, col) == 1

    def test_both_diagonals(self):
        board = board_from(["S.S", ".O.", "S.S"])
        assert count_sos(board, 1, 1) == 2

    def test_all_four_axes(self):
        board = board_from(["SSS", "SOS", "SSS"])
        assert count_sos(board, 1, 1) == 4

    def test_edge_o_cannot_be_centre(self):
        board = board_from(["OSS", "S..", "S.."])
        assert count_sos(board, 0, 0) == 0

    def test_one_side_missing(self):
        board = board_from(["S..", ".O.", "..."])
        assert count_sos(board, 1, 1) == 0


class TestPlacedS:
    @pytest.mark.parametrize("dr,dc", DIRECTIONS)
    def test_every_direction(self, dr, dc):
        board = Board(5)
        board.set(2, 2, Cell.S)
        board.set(2 + dr, 2 + dc, Cell.O)
        board.set(2 + 2 * dr, 2 + 2 * dc, Cell.S)
        assert count_sos(board, 2, 2) == 1

    def test_two_lines_at_once(self):
        board = board_from(["SOS", "O..", "S.."])
        assert count_sos(board, 0, 0) == 2

    def test_needs_o_in_between(self):
        board = board_from(["SSS", "...", "..."])
        assert count_sos(board, 0, 0) == 0

    def test_line_running_off_board(self):
        board = board_from(["...", "...", ".OS"])
        assert count_sos(board, 2, 2) == 0

    def test_middle_s_is_not_an_end(self):
        board = board_from(["OSO", "...", "..."])
        assert count_sos(board, 0, 1) == 0


class TestPlacedEmpty:
    def test_empty_cell_scores_nothing(self):
        board = board_from(["S.S", ".O.", "S.S"])
        assert count_sos(board, 0, 1) == 0
