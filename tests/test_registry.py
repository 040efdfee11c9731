"""
Tests for ToolRegistry and the Tool base classes.
"""

import pytest

from toolgate.tools import (
    ContentBlock,
    ContentType,
    MethodNotFoundError,
    Tool,
    ToolAnnotations,
    ToolRegistry,
    ToolRegistryError,
    ToolResult,
)


# =============================================================================
# Tools for Testing
# =============================================================================


class EchoTool(Tool):
    """Echo tool for testing the registry."""

    def __init__(self, name: str = "echo", schema: dict | None = None):
        self._name = name
        self._schema = schema or {
            "type": "object",
            "properties": {"text": {"type": "string"}},
            "required": ["text"],
        }

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return "Echo the input back"

    @property
    def input_schema(self) -> dict:
        return self._schema

    async def execute(self, arguments) -> ToolResult:
        return ToolResult.success(arguments.text)


# =============================================================================
# ToolResult Tests
# =============================================================================


class TestToolResult:
    """Tests for ToolResult and ContentBlock."""

    def test_success_result(self):
        result = ToolResult.success("hello")

        assert result.text == "hello"
        assert result.to_dict() == {"content": [{"type": "text", "text": "hello"}]}

    def test_from_json_pretty_prints(self):
        result = ToolResult.from_json([{"title": "Café"}])

        assert result.text == '[\n  {\n    "title": "Café"\n  }\n]'

    def test_content_block(self):
        block = ContentBlock.from_text("x")

        assert block.type == ContentType.TEXT
        assert block.to_dict() == {"type": "text", "text": "x"}

    def test_is_immutable(self):
        result = ToolResult.success("hello")

        with pytest.raises(AttributeError):
            result.content = ()


class TestToolAnnotations:
    """Tests for annotation serialization."""

    def test_only_set_hints_serialized(self):
        annotations = ToolAnnotations(title="Search", read_only_hint=True)

        assert annotations.to_dict() == {"title": "Search", "readOnlyHint": True}

    def test_default_tool_annotations(self):
        descriptor = EchoTool().descriptor.to_dict()

        assert descriptor["annotations"] == {
            "readOnlyHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        }


# =============================================================================
# Registry Tests
# =============================================================================


class TestToolRegistry:
    """Tests for ToolRegistry."""

    def test_register_and_get(self):
        registry = ToolRegistry()
        tool = EchoTool()

        registry.register(tool)

        assert registry.get("echo") is tool
        assert registry.get_required("echo") is tool
        assert "echo" in registry
        assert len(registry) == 1

    def test_get_missing_returns_none(self):
        assert ToolRegistry().get("nope") is None

    def test_get_required_raises_method_not_found(self):
        with pytest.raises(MethodNotFoundError, match="Unknown tool: nope"):
            ToolRegistry().get_required("nope")

    def test_duplicate_name_rejected(self):
        registry = ToolRegistry()
        registry.register(EchoTool())

        with pytest.raises(ToolRegistryError, match="already registered"):
            registry.register(EchoTool())

    def test_schema_must_be_object(self):
        with pytest.raises(ToolRegistryError, match="type: 'object'"):
            ToolRegistry().register(EchoTool(schema={"type": "array", "properties": {}}))

    def test_schema_must_have_properties(self):
        with pytest.raises(ToolRegistryError, match="properties"):
            ToolRegistry().register(EchoTool(schema={"type": "object"}))

    def test_unsupported_schema_rejected_at_registration(self):
        schema = {"type": "object", "properties": {"tags": {"type": "array"}}}

        with pytest.raises(ToolRegistryError, match="invalid input_schema"):
            ToolRegistry().register(EchoTool(schema=schema))

    def test_listing_preserves_registration_order(self):
        registry = ToolRegistry()
        for name in ("read_file", "search_code", "list_repository_content"):
            registry.register(EchoTool(name))

        assert [d.name for d in registry.list_tools()] == [
            "read_file",
            "search_code",
            "list_repository_content",
        ]

    def test_listing_is_stable(self):
        registry = ToolRegistry()
        registry.register(EchoTool("a"))
        registry.register(EchoTool("b"))

        assert registry.to_mcp_schemas() == registry.to_mcp_schemas()
        assert registry.list_tools() == registry.list_tools()

    def test_descriptor_wire_format(self):
        registry = ToolRegistry()
        registry.register(EchoTool())

        schema = registry.to_mcp_schemas()[0]

        assert schema["name"] == "echo"
        assert schema["description"] == "Echo the input back"
        assert schema["inputSchema"]["required"] == ["text"]

    def test_descriptor_schema_is_read_only(self):
        registry = ToolRegistry()
        registry.register(EchoTool())

        descriptor = registry.list_tools()[0]

        with pytest.raises(TypeError):
            descriptor.input_schema["properties"]["text"] = {"type": "integer"}
        with pytest.raises(TypeError):
            descriptor.input_schema["extra"] = True

    def test_listing_unaffected_by_caller_mutation(self):
        registry = ToolRegistry()
        registry.register(EchoTool())

        listed = registry.to_mcp_schemas()[0]
        listed["inputSchema"]["properties"].clear()
        listed["inputSchema"]["required"].append("other")

        assert registry.to_mcp_schemas()[0]["inputSchema"] == {
            "type": "object",
            "properties": {"text": {"type": "string"}},
            "required": ["text"],
        }

    def test_listing_unaffected_by_tool_schema_mutation(self):
        schema = {
            "type": "object",
            "properties": {"text": {"type": "string"}},
            "required": ["text"],
        }
        registry = ToolRegistry()
        registry.register(EchoTool(schema=schema))

        schema["properties"]["text"]["type"] = "integer"

        assert registry.to_mcp_schemas()[0]["inputSchema"]["properties"] == {
            "text": {"type": "string"}
        }

    def test_validate_arguments_uses_registered_schema(self):
        registry = ToolRegistry()
        registry.register(EchoTool())

        assert registry.validate_arguments("echo", {"text": "hi"}).text == "hi"

    def test_validate_arguments_unknown_tool(self):
        with pytest.raises(MethodNotFoundError):
            ToolRegistry().validate_arguments("echo", {})
