"""HistoryStore — append-only board history with branching.

The store is an immutable value. ``append`` and ``jump_to`` return a new
store; the snapshots themselves are shared between versions.

Branching: appending while ``current_step`` is behind the latest step first
drops every snapshot after ``current_step``. Jumping alone never drops
anything, so the abandoned future stays reachable until the next append.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from tictactoe_history.core.board import BoardSnapshot
from tictactoe_history.core.errors import OutOfRangeError

__all__ = ["HistoryStore"]


@dataclass(frozen=True)
class HistoryStore:
    snapshots: tuple[BoardSnapshot, ...] = field(
        default_factory=lambda: (BoardSnapshot.initial(),)
    )
    current_step: int = 0

    def __post_init__(self) -> None:
        if not self.snapshots:
            raise ValueError("History must hold at least the starting position.")
        if self.snapshots[0].last_move_index is not None:
            raise ValueError("First snapshot must be the starting position.")
        if not 0 <= self.current_step < len(self.snapshots):
            raise OutOfRangeError("step", self.current_step, len(self.snapshots))

    @classmethod
    def initial(cls) -> HistoryStore:
        return cls()

    # ------------------------------------------------------------------
    # Sequence access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.snapshots)

    def __getitem__(self, step: int) -> BoardSnapshot:
        return self.snapshots[step]

    def __iter__(self) -> Iterator[BoardSnapshot]:
        return iter(self.snapshots)

    @property
    def latest_step(self) -> int:
        return len(self.snapshots) - 1

    def current(self) -> BoardSnapshot:
        """Return the snapshot at ``current_step``."""
        return self.snapshots[self.current_step]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def append(self, snapshot: BoardSnapshot) -> HistoryStore:
        """Truncate after ``current_step``, then append ``snapshot``."""
        if snapshot.last_move_index is None:
            raise ValueError("Only the starting position may lack a move index.")
        if snapshot.board == self.current().board:
            raise ValueError("Snapshot repeats the current board.")

        kept = self.snapshots[: self.current_step + 1]
        return HistoryStore(snapshots=kept + (snapshot,), current_step=len(kept))

    def jump_to(self, step: int) -> HistoryStore:
        """Move ``current_step`` to ``step`` without touching snapshots."""
        if isinstance(step, bool) or not isinstance(step, int):
            raise OutOfRangeError("step", step, len(self.snapshots))
        if not 0 <= step < len(self.snapshots):
            raise OutOfRangeError("step", step, len(self.snapshots))
        return HistoryStore(snapshots=self.snapshots, current_step=step)
