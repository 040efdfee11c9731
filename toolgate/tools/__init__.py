"""
Toolgate Tools.

Tools wrap one backing-service operation each. The registry lists them,
the dispatcher validates arguments and runs them.

MCP Alignment:
    Tool interface follows Model Context Protocol standards.
    See: https://modelcontextprotocol.io/specification/

Usage:
    registry = ToolRegistry()
    registry.register(BraveWebSearchTool(client))

    dispatcher = ToolDispatcher(registry)
    result = await dispatcher.invoke(InvocationRequest("search", {"query": "python"}))
"""

from .base import (
    ContentBlock,
    ContentType,
    Tool,
    ToolAnnotations,
    ToolDescriptor,
    ToolResult,
)
from .dispatcher import InvocationRequest, ToolDispatcher
from .errors import (
    ErrorKind,
    InternalToolError,
    InvalidParamsError,
    MethodNotFoundError,
    ToolError,
)
from .registry import ToolRegistry, ToolRegistryError
from .validation import ToolArguments, build_argument_model, validate_arguments

__all__ = [
    # Core Tool Protocol
    "ContentBlock",
    "ContentType",
    "Tool",
    "ToolAnnotations",
    "ToolDescriptor",
    "ToolResult",
    # Registry and dispatch
    "InvocationRequest",
    "ToolDispatcher",
    "ToolRegistry",
    "ToolRegistryError",
    # Validation
    "ToolArguments",
    "build_argument_model",
    "validate_arguments",
    # Errors
    "ErrorKind",
    "InternalToolError",
    "InvalidParamsError",
    "MethodNotFoundError",
    "ToolError",
]
