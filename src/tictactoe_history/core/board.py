"""Board primitives — cells, 9-cell boards, and immutable snapshots.

Boards are row-major tuples of exactly nine cells (index = row * 3 + col).
Nothing here mutates: placing a mark builds a new tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "BOARD_SIZE",
    "CELL_COUNT",
    "Board",
    "BoardSnapshot",
    "Cell",
    "board_from_marks",
    "check_board",
    "empty_board",
    "is_full",
    "row_col",
    "with_mark",
]

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Cell(str, Enum):
    EMPTY = ""
    X = "X"
    O = "O"


Board = tuple[Cell, ...]


def empty_board() -> Board:
    return (Cell.EMPTY,) * CELL_COUNT


def with_mark(board: Board, index: int, mark: Cell) -> Board:
    """Return a copy of ``board`` with ``mark`` at ``index``."""
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def is_full(board: Board) -> bool:
    return all(cell is not Cell.EMPTY for cell in board)


def row_col(index: int) -> tuple[int, int]:
    """Return the 1-based (row, col) of a cell index."""
    return 1 + index // BOARD_SIZE, 1 + index % BOARD_SIZE


def check_board(board: Board) -> None:
    if len(board) != CELL_COUNT:
        raise ValueError(
            f"Board must have {CELL_COUNT} cells, got {len(board)}."
        )
    for cell in board:
        if not isinstance(cell, Cell):
            raise ValueError(f"Not a board cell: {cell!r}.")


@dataclass(frozen=True)
class BoardSnapshot:
    """Board state after a given step, plus which cell was just filled.

    ``last_move_index`` is None only for the empty starting position.
    """

    board: Board
    last_move_index: int | None = None

    def __post_init__(self) -> None:
        # Accept lists from callers but always store a tuple
        object.__setattr__(self, "board", tuple(self.board))
        check_board(self.board)

    @classmethod
    def initial(cls) -> BoardSnapshot:
        return cls(board=empty_board(), last_move_index=None)

    @property
    def last_mark(self) -> Cell | None:
        """Mark placed by the move that produced this snapshot."""
        if self.last_move_index is None:
            return None
        return self.board[self.last_move_index]


def board_from_marks(marks: str) -> Board:
    """Build a board from a 9-character string such as ``"XO.X....O"``.

    ``.`` (or a space) marks an empty cell.
    """
    if len(marks) != CELL_COUNT:
        raise ValueError(f"Expected {CELL_COUNT} marks, got {len(marks)}.")
    return tuple(
        Cell.EMPTY if ch in ". " else Cell(ch.upper()) for ch in marks
    )
