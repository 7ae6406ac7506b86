"""View model — the read-only picture of a GameState handed to renderers.

Everything here is derived from the state on demand. Sorting only changes
the order of ``move_list``; the underlying history is never reordered.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from tictactoe_history.core.board import BoardSnapshot, row_col
from tictactoe_history.core.win_detector import GameStatus
from tictactoe_history.game.state import GameState, evaluation, next_mark

__all__ = ["MoveEntry", "ViewModel", "build_view", "move_label", "status_text"]

GAME_START_LABEL = "Go to game start"


@dataclass(frozen=True)
class MoveEntry:
    label: str
    step: int
    is_current: bool = False


@dataclass(frozen=True)
class ViewModel:
    board: tuple[str, ...]
    winning_line: tuple[int, int, int] | None
    is_draw: bool
    status_text: str
    move_list: tuple[MoveEntry, ...]
    is_ascending: bool
    current_step: int

    @property
    def sort_button_text(self) -> str:
        """Label of the control that flips the order (names the target order)."""
        return "descending" if self.is_ascending else "ascending"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["board"] = list(self.board)
        data["winning_line"] = list(self.winning_line) if self.winning_line else None
        data["move_list"] = [asdict(entry) for entry in self.move_list]
        data["sort_button_text"] = self.sort_button_text
        return data


def move_label(step: int, snapshot: BoardSnapshot) -> str:
    if step == 0 or snapshot.last_move_index is None:
        return GAME_START_LABEL
    row, col = row_col(snapshot.last_move_index)
    return f"Go to move #{step}: {snapshot.last_mark.value} ({row}, {col})"


def status_text(state: GameState) -> str:
    result = evaluation(state)
    if result.status is GameStatus.WON:
        return f"Winner: {result.winner.value}"
    if result.status is GameStatus.DRAWN:
        return "Draw"
    return f"Next player: {next_mark(state.current_step).value}"


def build_view(state: GameState) -> ViewModel:
    result = evaluation(state)
    moves = [
        MoveEntry(
            label=move_label(step, snapshot),
            step=step,
            is_current=step == state.current_step,
        )
        for step, snapshot in enumerate(state.history)
    ]
    if not state.is_ascending:
        moves.reverse()

    return ViewModel(
        board=tuple(cell.value for cell in state.current().board),
        winning_line=result.winning_line,
        is_draw=result.is_draw,
        status_text=status_text(state),
        move_list=tuple(moves),
        is_ascending=state.is_ascending,
        current_step=state.current_step,
    )
