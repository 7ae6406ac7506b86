"""GameState and its pure transitions.

A GameState is an immutable value. ``place_mark``, ``jump_to`` and
``toggle_sort`` each return a new state and never modify their input, so a
rejected transition leaves the caller's state exactly as it was.

Whether the game is in progress, won or drawn is always derived from the
current board; it is never stored alongside the history.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from tictactoe_history.core.board import CELL_COUNT, BoardSnapshot, Cell, with_mark
from tictactoe_history.core.errors import CellOutOfRangeError, InvalidMoveError
from tictactoe_history.core.history import HistoryStore
from tictactoe_history.core.win_detector import Evaluation, GameStatus, evaluate

__all__ = [
    "GameState",
    "ValidationResult",
    "evaluation",
    "jump_to",
    "new_game",
    "next_mark",
    "place_mark",
    "toggle_sort",
    "validate_placement",
]


@dataclass(frozen=True)
class ValidationResult:
    """Result of checking a placement against the game rules."""

    legal: bool
    reason: str | None = None


@dataclass(frozen=True)
class GameState:
    history: HistoryStore = field(default_factory=HistoryStore.initial)
    is_ascending: bool = True

    @property
    def current_step(self) -> int:
        return self.history.current_step

    def current(self) -> BoardSnapshot:
        return self.history.current()


def new_game(ascending: bool = True) -> GameState:
    return GameState(history=HistoryStore.initial(), is_ascending=ascending)


def next_mark(step: int) -> Cell:
    """X moves from even steps (onto odd plies), O from odd steps."""
    return Cell.X if step % 2 == 0 else Cell.O


def evaluation(state: GameState) -> Evaluation:
    return evaluate(state.current().board)


# ------------------------------------------------------------------
# Transitions
# ------------------------------------------------------------------


def _in_range(cell: object) -> bool:
    if isinstance(cell, bool) or not isinstance(cell, int):
        return False
    return 0 <= cell < CELL_COUNT


def validate_placement(state: GameState, cell: int) -> ValidationResult:
    """Check a placement without raising. Does not modify state."""
    if not _in_range(cell):
        return ValidationResult(
            legal=False,
            reason=f"Cell {cell} out of bounds. Must be 0-{CELL_COUNT - 1}.",
        )

    result = evaluation(state)
    if result.status is GameStatus.WON:
        return ValidationResult(
            legal=False, reason=f"Game is over: {result.winner.value} has won."
        )
    if result.status is GameStatus.DRAWN:
        return ValidationResult(legal=False, reason="Game is over: draw.")

    occupant = state.current().board[cell]
    if occupant is not Cell.EMPTY:
        return ValidationResult(
            legal=False,
            reason=f"Cell {cell} is already occupied by '{occupant.value}'.",
        )

    return ValidationResult(legal=True)


def place_mark(state: GameState, cell: int) -> GameState:
    """Place the next player's mark at ``cell``.

    Raises CellOutOfRangeError for an index outside 0-8 and
    InvalidMoveError for an occupied cell or a finished game.
    """
    if not _in_range(cell):
        raise CellOutOfRangeError(cell, CELL_COUNT)
    check = validate_placement(state, cell)
    if not check.legal:
        raise InvalidMoveError(cell, check.reason)

    mark = next_mark(state.current_step)
    snapshot = BoardSnapshot(
        board=with_mark(state.current().board, cell, mark),
        last_move_index=cell,
    )
    return replace(state, history=state.history.append(snapshot))


def jump_to(state: GameState, step: int) -> GameState:
    """Travel to ``step``. Allowed whether or not the game has finished."""
    return replace(state, history=state.history.jump_to(step))


def toggle_sort(state: GameState) -> GameState:
    """Flip the move-list order. History and current step are untouched."""
    return replace(state, is_ascending=not state.is_ascending)
