"""GameController — the single entry point for intents from a driver.

The controller owns the current GameState and swaps it for the new value
after every accepted intent. Rejected intents raise after logging; the held
state is left as it was, so a driver can report the error and carry on.

Intents in dict form (as produced by IntentParser):

    {"intent": "place_mark", "cell": 4}
    {"intent": "jump_to", "step": 2}
    {"intent": "toggle_sort"}
"""

from __future__ import annotations

import logging

from tictactoe_history.core.errors import GameError
from tictactoe_history.game import state as transitions
from tictactoe_history.game.state import GameState, evaluation, new_game
from tictactoe_history.game.view import ViewModel, build_view

__all__ = ["GameController", "apply_intent"]

logger = logging.getLogger(__name__)


def apply_intent(state: GameState, intent: dict) -> tuple[GameState, ViewModel]:
    """Apply one intent to ``state`` and return the new state and its view.

    Raises GameError subclasses for rejected moves, including a missing
    cell or step, and ValueError for an intent name that does not exist.
    """
    name = intent.get("intent")
    if name == "place_mark":
        new_state = transitions.place_mark(state, intent.get("cell"))
    elif name == "jump_to":
        new_state = transitions.jump_to(state, intent.get("step"))
    elif name == "toggle_sort":
        new_state = transitions.toggle_sort(state)
    else:
        raise ValueError(f"Unknown intent: {name!r}")
    return new_state, build_view(new_state)


class GameController:
    """Holds one game session and applies intents to it in arrival order."""

    def __init__(self, ascending: bool = True) -> None:
        self._state = new_game(ascending=ascending)

    @property
    def state(self) -> GameState:
        return self._state

    def view(self) -> ViewModel:
        return build_view(self._state)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def place_mark(self, cell: int) -> ViewModel:
        return self.dispatch({"intent": "place_mark", "cell": cell})

    def jump_to(self, step: int) -> ViewModel:
        return self.dispatch({"intent": "jump_to", "step": step})

    def toggle_sort(self) -> ViewModel:
        return self.dispatch({"intent": "toggle_sort"})

    def dispatch(self, intent: dict) -> ViewModel:
        try:
            new_state, view = apply_intent(self._state, intent)
        except GameError as exc:
            logger.info("Rejected %s: %s", intent, exc)
            raise

        self._state = new_state
        logger.debug(
            "Applied %s (step %d of %d)",
            intent, new_state.current_step, new_state.history.latest_step,
        )
        if intent.get("intent") == "place_mark" and evaluation(new_state).is_over:
            logger.info(
                "Game finished at step %d: %s",
                new_state.current_step, view.status_text,
            )
        return view
