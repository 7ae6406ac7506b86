"""Game errors — every rejection the engine can signal.

Rejections never mutate state. Callers decide whether to surface them.
"""


class GameError(Exception):
    """Base class for all engine errors."""


class InvalidMoveError(GameError):
    """Raised when a mark cannot be placed: occupied cell or finished game."""

    def __init__(self, cell: object, reason: str):
        self.cell = cell
        self.reason = reason
        GameError.__init__(self, f"Cannot place at {cell!r}: {reason}")


class OutOfRangeError(GameError, IndexError):
    """Raised when a cell index or history step is outside its domain."""

    def __init__(self, kind: str, value: object, limit: int):
        self.kind = kind  # "cell" or "step"
        self.value = value
        self.limit = limit
        GameError.__init__(
            self,
            f"{kind.capitalize()} {value!r} out of range. "
            f"Must be between 0 and {limit - 1}."
        )


class CellOutOfRangeError(OutOfRangeError, InvalidMoveError):
    """A placement index outside 0-8. Both out of range and an invalid move."""

    def __init__(self, value: object, limit: int):
        OutOfRangeError.__init__(self, "cell", value, limit)
        self.cell = value
        self.reason = str(self)


class ConfigError(GameError):
    """Raised when a session config file is malformed."""
