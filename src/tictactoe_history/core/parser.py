"""IntentParser — turn one line of driver input into a validated intent.

Accepts either a JSON object (``{"intent": "place_mark", "cell": 4}``) or a
shorthand command (``place 4``, ``jump 2``, ``sort``). Both forms are
validated against the intent JSON Schema, so out-of-range cells and negative
steps are rejected here, before they reach the controller.
"""

import json
from dataclasses import dataclass
from pathlib import Path

import jsonschema

from tictactoe_history.core.schemas import load_schema

INTENT_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "game" / "schema.json"

# Shorthand verb -> (intent name, argument key)
_SHORTHAND = {
    "place": ("place_mark", "cell"),
    "p": ("place_mark", "cell"),
    "jump": ("jump_to", "step"),
    "j": ("jump_to", "step"),
    "sort": ("toggle_sort", None),
    "s": ("toggle_sort", None),
}


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing one line of input."""

    success: bool
    intent: dict | None
    error: str | None


class IntentParser:
    """Parse and schema-validate intents from raw text."""

    def __init__(self, schema: dict | None = None):
        self._schema = schema if schema is not None else load_schema(INTENT_SCHEMA_PATH)

    @property
    def schema(self) -> dict:
        return self._schema

    def parse(self, raw_text: str) -> ParseResult:
        text = raw_text.strip()
        if not text:
            return ParseResult(success=False, intent=None, error="Empty input")

        if text.startswith("{"):
            try:
                candidate = json.loads(text)
            except json.JSONDecodeError as e:
                return ParseResult(
                    success=False, intent=None, error=f"JSON parse error: {e}"
                )
        else:
            candidate, error = self._parse_shorthand(text)
            if error:
                return ParseResult(success=False, intent=None, error=error)

        return self.validate(candidate)

    def validate(self, candidate: object) -> ParseResult:
        """Validate an already-decoded intent."""
        if not isinstance(candidate, dict):
            return ParseResult(
                success=False, intent=None, error="Intent is not an object"
            )
        try:
            jsonschema.validate(candidate, self._schema)
        except jsonschema.ValidationError as e:
            return ParseResult(
                success=False, intent=None, error=f"Schema validation: {e.message}"
            )

        intent = dict(candidate)
        # JSON Schema counts 4.0 as an integer; the controller wants a real int
        for key in ("cell", "step"):
            if key in intent:
                intent[key] = int(intent[key])
        return ParseResult(success=True, intent=intent, error=None)

    @staticmethod
    def _parse_shorthand(text: str) -> tuple[dict | None, str | None]:
        verb, *args = text.split()
        entry = _SHORTHAND.get(verb.lower())
        if entry is None:
            return None, f"Unknown command: {verb!r}. Use place, jump or sort."

        name, key = entry
        if key is None:
            if args:
                return None, f"{verb!r} takes no arguments"
            return {"intent": name}, None

        if len(args) != 1:
            return None, f"{verb!r} takes exactly one number"
        try:
            value = int(args[0])
        except ValueError:
            return None, f"Not a number: {args[0]!r}"
        return {"intent": name, key: value}, None
