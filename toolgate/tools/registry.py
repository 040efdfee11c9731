"""
Tool Registry.

The registry is the single source of truth for what an adapter accepts:
- Registration with validation
- Lookup by name
- Descriptor listing for `tools/list`
- Argument validation built from the same schemas

Tools are registered once at startup and the registry is read-only
afterwards, so it can be shared freely across invocations.

Usage:
    registry = ToolRegistry()
    registry.register(ReadFileTool(client))
    registry.register(SearchCodeTool(client))

    descriptors = registry.list_tools()
    arguments = registry.validate_arguments("read_file", {"owner": "...", ...})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .errors import MethodNotFoundError
from .validation import SchemaError, ToolArguments, build_argument_model, validate_arguments

if TYPE_CHECKING:
    from .base import Tool, ToolDescriptor

logger = logging.getLogger(__name__)


class ToolRegistryError(Exception):
    """Error in tool registry operations."""

    pass


class ToolRegistry:
    """
    Registry of the tools one adapter exposes.

    Listing order is registration order.

    Example:
        registry = ToolRegistry()
        registry.register(BraveWebSearchTool(client))

        tool = registry.get_required("search")
        arguments = registry.validate_arguments("search", {"query": "python"})
        result = await tool.execute(arguments)
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}
        self._descriptors: dict[str, ToolDescriptor] = {}
        self._argument_models: dict[str, type[ToolArguments]] = {}

    def register(self, tool: Tool) -> None:
        """
        Register a tool.

        Args:
            tool: Tool instance to register

        Raises:
            ToolRegistryError: If the name is taken or the tool is invalid
        """
        if tool.name in self._tools:
            raise ToolRegistryError(
                f"Tool '{tool.name}' already registered. Use a unique name."
            )

        self._validate_tool(tool)

        descriptor = tool.descriptor
        try:
            argument_model = build_argument_model(descriptor.name, descriptor.input_schema)
        except SchemaError as e:
            raise ToolRegistryError(f"Tool '{tool.name}' has an invalid input_schema: {e}") from e

        self._tools[tool.name] = tool
        self._descriptors[tool.name] = descriptor
        self._argument_models[tool.name] = argument_model
        logger.debug(f"[tool_registry] Registered tool: {tool.name}")

    def get(self, name: str) -> Tool | None:
        """Get a tool by name, or None if not registered."""
        return self._tools.get(name)

    def get_required(self, name: str) -> Tool:
        """
        Get a tool by name, raising if not found.

        Raises:
            MethodNotFoundError: If tool not registered
        """
        tool = self._tools.get(name)
        if tool is None:
            raise MethodNotFoundError(f"Unknown tool: {name}")
        return tool

    def list_tools(self) -> list[ToolDescriptor]:
        """
        List descriptors of all registered tools.

        Returns:
            Descriptors in registration order
        """
        return list(self._descriptors.values())

    def list_names(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def to_mcp_schemas(self) -> list[dict[str, Any]]:
        """Get all descriptors in `tools/list` wire format."""
        return [descriptor.to_dict() for descriptor in self._descriptors.values()]

    def validate_arguments(self, name: str, arguments: Any) -> ToolArguments:
        """
        Validate arguments for a registered tool.

        Raises:
            MethodNotFoundError: If tool not registered
            InvalidParamsError: If arguments do not match the schema
        """
        model = self._argument_models.get(name)
        if model is None:
            raise MethodNotFoundError(f"Unknown tool: {name}")
        return validate_arguments(model, arguments)

    def _validate_tool(self, tool: Tool) -> None:
        if not tool.name or not isinstance(tool.name, str):
            raise ToolRegistryError(f"Tool must have a valid name: {tool}")

        if not tool.description or not isinstance(tool.description, str):
            raise ToolRegistryError(f"Tool '{tool.name}' must have a description")

        schema = tool.input_schema
        if not isinstance(schema, dict):
            raise ToolRegistryError(f"Tool '{tool.name}' input_schema must be a dict")

        if schema.get("type") != "object":
            raise ToolRegistryError(f"Tool '{tool.name}' input_schema must have type: 'object'")

        if "properties" not in schema:
            raise ToolRegistryError(f"Tool '{tool.name}' input_schema must have 'properties'")

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __repr__(self) -> str:
        return f"<ToolRegistry tools={list(self._tools.keys())}>"
