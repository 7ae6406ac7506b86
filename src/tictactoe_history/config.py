"""Session configuration loader."""

import yaml
from dataclasses import dataclass, field
from pathlib import Path

from tictactoe_history.core.errors import ConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DisplayConfig:
    color: bool = True
    show_coordinates: bool = True  # axis labels around the board


@dataclass
class SessionConfig:
    ascending: bool = True  # initial move-list order
    log_level: str = "WARNING"
    display: DisplayConfig = field(default_factory=DisplayConfig)


def _expect(value, kind: type, key: str):
    if not isinstance(value, kind):
        raise ConfigError(
            f"{key} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def load_config(path: Path) -> SessionConfig:
    """Load session config from YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    session = _expect(raw.get("session") or {}, dict, "session")
    logging_raw = _expect(raw.get("logging") or {}, dict, "logging")
    display_raw = _expect(raw.get("display") or {}, dict, "display")

    log_level = str(logging_raw.get("level", "WARNING")).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"logging.level must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}"
        )

    return SessionConfig(
        ascending=_expect(session.get("ascending", True), bool, "session.ascending"),
        log_level=log_level,
        display=DisplayConfig(
            color=_expect(display_raw.get("color", True), bool, "display.color"),
            show_coordinates=_expect(
                display_raw.get("show_coordinates", True),
                bool,
                "display.show_coordinates",
            ),
        ),
    )
