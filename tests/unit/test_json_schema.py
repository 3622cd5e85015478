"""
Unit tests for services/llm/schema.py

The generator-facing schema must describe exactly what the validator
accepts, so these tests check it against the model declarations.
"""

import pytest

from models.workout import BLOCK_TYPES, ISO_DURATION_PATTERN
from services.llm.schema import JSON_SCHEMA_DIALECT, workout_json_schema


def resolve(schema, ref):
    """Resolve a local #/$defs/... reference."""
    assert ref.startswith("#/$defs/")
    return schema["$defs"][ref.split("/")[-1]]


def block_defs(schema):
    """Map block tag -> block definition, via the discriminator mapping."""
    items = schema["properties"]["blocks"]["items"]
    return {tag: resolve(schema, ref) for tag, ref in items["discriminator"]["mapping"].items()}


def literal_value(prop):
    if "const" in prop:
        return prop["const"]
    return prop["enum"][0]


def string_branch(prop):
    """The string schema of a possibly nullable property."""
    if "anyOf" in prop:
        return next(p for p in prop["anyOf"] if p.get("type") == "string")
    return prop


@pytest.fixture(scope="module")
def schema():
    return workout_json_schema()


@pytest.mark.unit
class TestWorkoutJsonSchema:
    """Tests for workout_json_schema()."""

    def test_declares_dialect(self, schema):
        assert schema["$schema"] == JSON_SCHEMA_DIALECT

    def test_top_level_shape(self, schema):
        assert schema["type"] == "object"
        assert schema["title"] == "Workout"
        assert schema["additionalProperties"] is False
        assert set(schema["required"]) == {"id", "title", "blocks"}
        assert schema["properties"]["blocks"]["minItems"] == 1

    def test_level_enum(self, schema):
        level = schema["properties"]["level"]
        values = [v for branch in level["anyOf"] for v in branch.get("enum", [])]
        assert set(values) == {"beginner", "intermediate", "advanced", "rx"}

    def test_blocks_are_a_discriminated_union(self, schema):
        items = schema["properties"]["blocks"]["items"]
        assert items["discriminator"]["propertyName"] == "type"
        assert len(items["oneOf"]) == 5
        assert set(items["discriminator"]["mapping"]) == BLOCK_TYPES

    def test_each_block_tag_is_constant(self, schema):
        for tag, definition in block_defs(schema).items():
            assert literal_value(definition["properties"]["type"]) == tag
            assert "type" in definition["required"]
            assert "title" in definition["required"]

    def test_every_definition_is_closed(self, schema):
        for name, definition in schema["$defs"].items():
            assert definition.get("additionalProperties") is False, name

    def test_amrap_required_fields(self, schema):
        amrap = block_defs(schema)["amrap"]
        assert set(amrap["required"]) == {"type", "title", "duration", "sequence"}
        assert amrap["properties"]["repeat"]["default"] == 1

    def test_superset_pair_has_exactly_two_items(self, schema):
        pair = block_defs(schema)["superset"]["properties"]["pair"]
        assert pair["minItems"] == 2
        assert pair["maxItems"] == 2

    def test_duration_fields_carry_pattern(self, schema):
        blocks = block_defs(schema)
        durations = [
            blocks["amrap"]["properties"]["duration"],
            blocks["for_time"]["properties"]["time_cap"],
            blocks["superset"]["properties"]["rest_between_sets"],
        ]
        for prop in durations:
            assert string_branch(prop)["pattern"] == ISO_DURATION_PATTERN

    def test_returns_private_copies(self):
        first = workout_json_schema()
        first["properties"].clear()
        assert workout_json_schema()["properties"]
