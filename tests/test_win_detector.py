"""Tests for win/draw detection."""

import itertools

import pytest

from tictactoe_history.core.board import Cell, board_from_marks, empty_board
from tictactoe_history.core.win_detector import WIN_LINES, GameStatus, evaluate


def _line_board(line, mark):
    cells = [Cell.EMPTY] * 9
    for i in line:
        cells[i] = mark
    return tuple(cells)


# ------------------------------------------------------------------
# Win detection — all 8 lines
# ------------------------------------------------------------------

class TestWinLines:
    def test_eight_lines_in_order(self):
        assert WIN_LINES == (
            (0, 1, 2), (3, 4, 5), (6, 7, 8),
            (0, 3, 6), (1, 4, 7), (2, 5, 8),
            (0, 4, 8), (2, 4, 6),
        )

    @pytest.mark.parametrize("line", WIN_LINES)
    @pytest.mark.parametrize("mark", [Cell.X, Cell.O])
    def test_single_line_wins(self, line, mark):
        result = evaluate(_line_board(line, mark))
        assert result.winner is mark
        assert result.winning_line == line
        assert result.is_draw is False
        assert result.status is GameStatus.WON

    def test_mixed_line_is_not_a_win(self):
        result = evaluate(board_from_marks("XXO......"))
        assert result.winner is None
        assert result.winning_line is None

    def test_first_line_in_order_wins(self):
        # Unreachable board with both a top row and a left column for X
        result = evaluate(board_from_marks("XXXX..X.."))
        assert result.winning_line == (0, 1, 2)

    def test_win_on_full_board_is_not_draw(self):
        # X O X
        # O X O
        # O X X
        result = evaluate(board_from_marks("XOXOXOOXX"))
        assert result.winner is Cell.X
        assert result.winning_line == (0, 4, 8)
        assert result.is_draw is False


# ------------------------------------------------------------------
# Draw / in progress
# ------------------------------------------------------------------

class TestDraw:
    def test_empty_board_not_draw(self):
        result = evaluate(empty_board())
        assert result.winner is None
        assert result.winning_line is None
        assert result.is_draw is False
        assert result.status is GameStatus.IN_PROGRESS
        assert result.is_over is False

    def test_full_board_without_line_is_draw(self):
        # X O X
        # X O O
        # O X X
        result = evaluate(board_from_marks("XOXXOOOXX"))
        assert result.winner is None
        assert result.is_draw is True
        assert result.status is GameStatus.DRAWN
        assert result.is_over is True

    def test_row_major_xoxoxooxo_is_draw(self):
        # X O X
        # O X O
        # O X O
        result = evaluate(board_from_marks("XOXOXOOXO"))
        assert result.winner is None
        assert result.is_draw is True

    def test_one_empty_cell_not_draw(self):
        result = evaluate(board_from_marks("XOXXOOOX."))
        assert result.is_draw is False
        assert result.status is GameStatus.IN_PROGRESS


# ------------------------------------------------------------------
# Totality
# ------------------------------------------------------------------

class TestTotality:
    def test_every_board_classifies_consistently(self):
        for cells in itertools.product(list(Cell), repeat=9):
            board = tuple(cells)
            first = evaluate(board)
            assert evaluate(board) == first
            if first.winner is not None:
                a, b, c = first.winning_line
                assert board[a] is board[b] is board[c] is first.winner
                assert first.is_draw is False
            else:
                assert first.winning_line is None
                assert first.is_draw == all(cell is not Cell.EMPTY for cell in board)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            evaluate((Cell.EMPTY,) * 8)

    def test_non_cell_rejected(self):
        with pytest.raises(ValueError):
            evaluate(("X",) * 9)
