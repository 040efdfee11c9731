"""
Tests for schema-driven argument validation.

Tests cover:
- Required and optional fields
- Defaults for absent and null optional fields
- Strict typing (no coercion)
- Range and length constraints
- Unsupported schemas
"""

import pytest
from pydantic import ValidationError

from toolgate.tools.errors import ErrorKind, InvalidParamsError
from toolgate.tools.validation import (
    SchemaError,
    ToolArguments,
    build_argument_model,
    validate_arguments,
)

SEARCH_SCHEMA = {
    "type": "object",
    "properties": {
        "query": {"type": "string", "minLength": 1},
        "count": {"type": "integer", "minimum": 1, "maximum": 20, "default": 5},
        "safe": {"type": "boolean"},
        "boost": {"type": "number"},
    },
    "required": ["query"],
}


@pytest.fixture
def search_model():
    return build_argument_model("web_search", SEARCH_SCHEMA)


# =============================================================================
# Model Generation Tests
# =============================================================================


class TestBuildArgumentModel:
    """Tests for build_argument_model()."""

    def test_model_is_tool_arguments_subclass(self, search_model):
        assert issubclass(search_model, ToolArguments)
        assert search_model.__name__ == "WebSearchArguments"

    def test_required_field_not_in_properties(self):
        with pytest.raises(SchemaError, match="ghost"):
            build_argument_model(
                "broken",
                {"type": "object", "properties": {}, "required": ["ghost"]},
            )

    def test_unsupported_type(self):
        with pytest.raises(SchemaError, match="Unsupported type"):
            build_argument_model(
                "broken",
                {"type": "object", "properties": {"items": {"type": "array"}}},
            )

    def test_reserved_property_name(self):
        with pytest.raises(SchemaError, match="model_config"):
            build_argument_model(
                "broken",
                {"type": "object", "properties": {"model_config": {"type": "string"}}},
            )

    def test_empty_schema_accepts_empty_arguments(self):
        model = build_argument_model("noop", {"type": "object", "properties": {}})

        arguments = validate_arguments(model, None)

        assert isinstance(arguments, ToolArguments)


# =============================================================================
# Validation Tests
# =============================================================================


class TestValidateArguments:
    """Tests for validate_arguments()."""

    def test_valid_arguments(self, search_model):
        arguments = validate_arguments(search_model, {"query": "python", "count": 3})

        assert arguments.query == "python"
        assert arguments.count == 3

    def test_default_applied_when_absent(self, search_model):
        arguments = validate_arguments(search_model, {"query": "python"})

        assert arguments.count == 5
        assert arguments.safe is None

    def test_null_optional_treated_as_absent(self, search_model):
        arguments = validate_arguments(search_model, {"query": "python", "count": None})

        assert arguments.count == 5

    def test_missing_required(self, search_model):
        with pytest.raises(InvalidParamsError) as exc_info:
            validate_arguments(search_model, {"count": 3})

        assert exc_info.value.message == "Missing required argument: query"
        assert exc_info.value.kind == ErrorKind.INVALID_PARAMS

    def test_null_required_is_missing(self, search_model):
        with pytest.raises(InvalidParamsError, match="Missing required argument: query"):
            validate_arguments(search_model, {"query": None})

    def test_no_arguments_at_all(self, search_model):
        with pytest.raises(InvalidParamsError, match="query"):
            validate_arguments(search_model, None)

    def test_arguments_must_be_object(self, search_model):
        with pytest.raises(InvalidParamsError, match="Arguments must be an object"):
            validate_arguments(search_model, ["python"])

    def test_string_is_not_integer(self, search_model):
        with pytest.raises(InvalidParamsError, match="Invalid argument 'count'"):
            validate_arguments(search_model, {"query": "python", "count": "5"})

    def test_float_is_not_integer(self, search_model):
        with pytest.raises(InvalidParamsError, match="Invalid argument 'count'"):
            validate_arguments(search_model, {"query": "python", "count": 5.0})

    def test_integer_is_not_string(self, search_model):
        with pytest.raises(InvalidParamsError, match="Invalid argument 'query'"):
            validate_arguments(search_model, {"query": 42})

    def test_boolean_is_not_number(self, search_model):
        with pytest.raises(InvalidParamsError, match="Invalid argument 'boost'"):
            validate_arguments(search_model, {"query": "python", "boost": True})

    def test_number_accepts_int_and_float(self, search_model):
        assert validate_arguments(search_model, {"query": "q", "boost": 2}).boost == 2
        assert validate_arguments(search_model, {"query": "q", "boost": 1.5}).boost == 1.5

    @pytest.mark.parametrize("count", [0, 21, -1])
    def test_out_of_range(self, search_model, count):
        with pytest.raises(InvalidParamsError, match="Invalid argument 'count'"):
            validate_arguments(search_model, {"query": "python", "count": count})

    @pytest.mark.parametrize("count", [1, 20])
    def test_range_bounds_inclusive(self, search_model, count):
        assert validate_arguments(search_model, {"query": "q", "count": count}).count == count

    def test_empty_string_below_min_length(self, search_model):
        with pytest.raises(InvalidParamsError, match="Invalid argument 'query'"):
            validate_arguments(search_model, {"query": ""})

    def test_unknown_fields_ignored(self, search_model):
        arguments = validate_arguments(search_model, {"query": "python", "page": 2})

        assert not hasattr(arguments, "page")

    def test_arguments_are_immutable(self, search_model):
        arguments = validate_arguments(search_model, {"query": "python"})

        with pytest.raises(ValidationError):
            arguments.query = "changed"
