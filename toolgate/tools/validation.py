"""
Schema-driven argument validation.

Each registered tool gets a frozen pydantic model generated from its
input_schema. Invocations are validated against that model before the
tool runs, so a malformed argument bag never reaches a backing service.

Rules:
    - Types are strict: "5" is not an integer, true is not a number.
    - Required fields must be present and non-null.
    - Optional fields that are absent or null take the schema default,
      or None when the schema declares none.
    - Unknown fields are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    create_model,
)

from .errors import InvalidParamsError


class ToolArguments(BaseModel):
    """Immutable, validated argument record handed to Tool.execute()."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)


class SchemaError(ValueError):
    """Raised when an input_schema cannot be turned into a validator."""

    pass


_JSON_TYPES: dict[str, Any] = {
    "string": StrictStr,
    "integer": StrictInt,
    "number": Union[StrictInt, StrictFloat],
    "boolean": StrictBool,
}

# JSON Schema keyword -> pydantic Field constraint
_CONSTRAINTS = {
    "minimum": "ge",
    "maximum": "le",
    "minLength": "min_length",
    "maxLength": "max_length",
}


def _annotation_for(field_name: str, definition: Mapping[str, Any]) -> Any:
    json_type = definition.get("type")
    base = _JSON_TYPES.get(json_type)
    if base is None:
        raise SchemaError(f"Unsupported type for '{field_name}': {json_type!r}")

    constraints = {
        pydantic_name: definition[keyword]
        for keyword, pydantic_name in _CONSTRAINTS.items()
        if keyword in definition
    }
    if constraints:
        return Annotated[base, Field(**constraints)]
    return base


def build_argument_model(tool_name: str, schema: Mapping[str, Any]) -> type[ToolArguments]:
    """
    Generate the validation model for a tool's input_schema.

    Args:
        tool_name: Tool name, used to name the generated model
        schema: JSON Schema object with properties and required list

    Returns:
        A ToolArguments subclass with one field per schema property

    Raises:
        SchemaError: If a property uses an unsupported type or name
    """
    properties: Mapping[str, Any] = schema.get("properties", {})
    required = set(schema.get("required", []))

    unknown_required = required - set(properties)
    if unknown_required:
        raise SchemaError(f"Required fields missing from properties: {sorted(unknown_required)}")

    fields: dict[str, Any] = {}
    for field_name, definition in properties.items():
        if not field_name.isidentifier() or field_name.startswith(("_", "model_")):
            raise SchemaError(f"Unsupported property name: {field_name!r}")

        annotation = _annotation_for(field_name, definition)
        if field_name in required:
            fields[field_name] = (annotation, ...)
        else:
            fields[field_name] = (Optional[annotation], definition.get("default"))

    model_name = "".join(part.capitalize() for part in tool_name.split("_")) + "Arguments"
    return create_model(model_name, __base__=ToolArguments, **fields)


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = first.get("loc") or ()
    field_name = str(loc[0]) if loc else "arguments"

    if first.get("type") == "missing":
        return f"Missing required argument: {field_name}"
    return f"Invalid argument '{field_name}': {first.get('msg')}"


def validate_arguments(model: type[ToolArguments], arguments: Any) -> ToolArguments:
    """
    Validate a raw argument bag against a generated model.

    Args:
        model: Model from build_argument_model()
        arguments: Raw arguments from the invocation (mapping or None)

    Returns:
        Frozen ToolArguments instance

    Raises:
        InvalidParamsError: Naming the first offending field
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidParamsError("Arguments must be an object")

    present = {key: value for key, value in arguments.items() if value is not None}

    try:
        return model.model_validate(present)
    except ValidationError as e:
        raise InvalidParamsError(_describe(e)) from None
