"""Win/draw detection for a single 3x3 board.

Pure classification: the same board always yields the same Evaluation, and
every one of the 3^9 cell configurations is accepted, reachable or not.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tictactoe_history.core.board import Board, Cell, check_board, is_full

__all__ = ["WIN_LINES", "Evaluation", "GameStatus", "evaluate"]

# Eight lines to check for a win: 3 rows, 3 cols, 2 diagonals
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Evaluation:
    """Result of classifying a board."""

    winner: Cell | None
    winning_line: tuple[int, int, int] | None
    is_draw: bool

    @property
    def status(self) -> GameStatus:
        if self.winner is not None:
            return GameStatus.WON
        if self.is_draw:
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS


def evaluate(board: Board) -> Evaluation:
    """Classify ``board`` as won, drawn, or still in progress.

    The first completed line in WIN_LINES order wins. A board is a draw only
    when it is full and no line is completed.
    """
    check_board(board)

    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not Cell.EMPTY and board[a] == board[b] == board[c]:
            return Evaluation(winner=board[a], winning_line=line, is_draw=False)

    return Evaluation(winner=None, winning_line=None, is_draw=is_full(board))
