"""Tests for IntentParser — JSON and shorthand intents, schema validation."""

import pytest

from tictactoe_history.core.parser import INTENT_SCHEMA_PATH, IntentParser, ParseResult
from tictactoe_history.core.schemas import load_schema


@pytest.fixture
def parser():
    return IntentParser()


class TestSchema:
    def test_intent_schema_loads(self):
        schema = load_schema(INTENT_SCHEMA_PATH)
        assert schema["type"] == "object"
        assert len(schema["oneOf"]) == 3


class TestJsonIntents:
    def test_place_mark(self, parser):
        result = parser.parse('{"intent": "place_mark", "cell": 4}')
        assert result == ParseResult(
            success=True, intent={"intent": "place_mark", "cell": 4}, error=None
        )

    def test_jump_to(self, parser):
        result = parser.parse('{"intent": "jump_to", "step": 3}')
        assert result.success is True
        assert result.intent == {"intent": "jump_to", "step": 3}

    def test_toggle_sort(self, parser):
        result = parser.parse('{"intent": "toggle_sort"}')
        assert result.intent == {"intent": "toggle_sort"}

    @pytest.mark.parametrize("cell", [-1, 9])
    def test_cell_out_of_range_rejected(self, parser, cell):
        result = parser.parse(f'{{"intent": "place_mark", "cell": {cell}}}')
        assert result.success is False
        assert result.error.startswith("Schema validation")

    def test_negative_step_rejected(self, parser):
        assert parser.parse('{"intent": "jump_to", "step": -1}').success is False

    def test_bool_cell_rejected(self, parser):
        assert parser.parse('{"intent": "place_mark", "cell": true}').success is False

    def test_float_cell_coerced(self, parser):
        result = parser.parse('{"intent": "place_mark", "cell": 4.0}')
        assert result.success is True
        assert result.intent["cell"] == 4
        assert isinstance(result.intent["cell"], int)

    def test_extra_properties_rejected(self, parser):
        result = parser.parse('{"intent": "toggle_sort", "now": true}')
        assert result.success is False

    def test_missing_cell_rejected(self, parser):
        assert parser.parse('{"intent": "place_mark"}').success is False

    def test_unknown_intent_rejected(self, parser):
        assert parser.parse('{"intent": "reset"}').success is False

    def test_malformed_json(self, parser):
        result = parser.parse('{"intent": place_mark}')
        assert result.success is False
        assert "JSON parse error" in result.error

    def test_validate_non_object(self, parser):
        result = parser.validate([1, 2])
        assert result.success is False
        assert result.error == "Intent is not an object"


class TestShorthand:
    @pytest.mark.parametrize("text,intent", [
        ("place 4", {"intent": "place_mark", "cell": 4}),
        ("P 0", {"intent": "place_mark", "cell": 0}),
        ("jump 2", {"intent": "jump_to", "step": 2}),
        ("j 0", {"intent": "jump_to", "step": 0}),
        ("sort", {"intent": "toggle_sort"}),
        ("  s  ", {"intent": "toggle_sort"}),
    ])
    def test_commands(self, parser, text, intent):
        result = parser.parse(text)
        assert result.success is True
        assert result.intent == intent

    def test_empty_input(self, parser):
        result = parser.parse("   ")
        assert result.success is False
        assert result.error == "Empty input"

    def test_unknown_command(self, parser):
        result = parser.parse("undo")
        assert result.success is False
        assert "Unknown command" in result.error

    def test_missing_number(self, parser):
        assert parser.parse("place").success is False

    def test_not_a_number(self, parser):
        result = parser.parse("jump two")
        assert result.success is False
        assert "Not a number" in result.error

    def test_sort_takes_no_arguments(self, parser):
        assert parser.parse("sort 1").success is False

    def test_shorthand_range_checked_by_schema(self, parser):
        result = parser.parse("place 12")
        assert result.success is False
        assert result.error.startswith("Schema validation")
