"""
Tools as the orchestrator sees them.

Every adapter operation (`search`, `read_file`, `get_merge_request_content`,
...) is a Tool subclass. Its ToolDescriptor is what `tools/list` returns;
its ToolResult is what `tools/call` returns, always as text blocks
(JSON payloads are serialized before they leave the tool).

Usage:
    class EchoTool(Tool):
        @property
        def name(self) -> str:
            return "echo"

        @property
        def description(self) -> str:
            return "Echo the input back"

        @property
        def input_schema(self) -> dict:
            return {
                "type": "object",
                "properties": {
                    "text": {"type": "string"}
                },
                "required": ["text"]
            }

        async def execute(self, arguments: ToolArguments) -> ToolResult:
            return ToolResult.success(arguments.text)
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .validation import ToolArguments


class ContentType(Enum):
    """Content block types an adapter emits."""

    TEXT = "text"


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """
    One `{"type": "text", "text": ...}` entry of a tool result.

    Adapters only ever emit text blocks; structured payloads are
    serialized to JSON text before they reach the caller.
    """

    type: ContentType
    text_content: str

    @classmethod
    def from_text(cls, content: str) -> ContentBlock:
        """Create a text content block."""
        return cls(type=ContentType.TEXT, text_content=content)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"type": self.type.value, "text": self.text_content}


@dataclass(frozen=True, slots=True)
class ToolAnnotations:
    """
    MCP `annotations` object listed with a tool.

    Hints only; nothing in the dispatcher acts on them. Only fields that
    differ from the MCP defaults are serialized.
    """

    title: str | None = None
    read_only_hint: bool = False
    idempotent_hint: bool = False
    open_world_hint: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {}

        if self.title is not None:
            result["title"] = self.title
        if self.read_only_hint:
            result["readOnlyHint"] = True
        if self.idempotent_hint:
            result["idempotentHint"] = True
        if self.open_world_hint:
            result["openWorldHint"] = True

        return result


# Every adapter tool is a read-only call against a third-party API
READ_ONLY_REMOTE = ToolAnnotations(
    read_only_hint=True,
    idempotent_hint=True,
    open_world_hint=True,
)


def _freeze(value: Any) -> Any:
    """Read-only deep copy of decoded JSON: dicts become mapping proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    """Plain dict/list copy of a frozen value."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """
    Listing entry for a tool.

    Constructed once when the tool is registered and never mutated.
    input_schema is stored as a read-only copy of what the tool declared;
    argument validation is built from this copy, so listing and
    validation cannot drift apart. to_dict() hands out fresh plain dicts.
    """

    name: str
    description: str
    input_schema: Mapping[str, Any]
    annotations: ToolAnnotations = field(default_factory=ToolAnnotations)

    def __post_init__(self):
        object.__setattr__(self, "input_schema", _freeze(self.input_schema))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the MCP `tools/list` wire format."""
        result: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "inputSchema": _thaw(self.input_schema),
        }

        annotations = self.annotations.to_dict()
        if annotations:
            result["annotations"] = annotations

        return result


@dataclass(frozen=True, slots=True)
class ToolResult:
    """
    Successful outcome of one invocation.

    Failures are not represented here: tools raise a ToolError
    (see toolgate.tools.errors) and the transport turns it into a
    protocol-level error response.

    Example:
        ToolResult.success("No results found.")
        ToolResult.from_json([{"title": "...", "url": "..."}])
    """

    content: tuple[ContentBlock, ...]

    @classmethod
    def success(cls, text: str) -> ToolResult:
        """Create a result holding a single text block."""
        return cls(content=(ContentBlock.from_text(text),))

    @classmethod
    def from_json(cls, payload: Any) -> ToolResult:
        """Create a result whose text is the pretty-printed JSON payload."""
        return cls.success(json.dumps(payload, indent=2, ensure_ascii=False))

    @property
    def text(self) -> str:
        """Get the primary text content (convenience accessor)."""
        for block in self.content:
            if block.type == ContentType.TEXT:
                return block.text_content
        return ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"content": [block.to_dict() for block in self.content]}


class Tool(ABC):
    """
    One operation exposed by an adapter.

    Contract:
        - name: Unique identifier (snake_case)
        - description: Clear description for the orchestrator
        - input_schema: JSON Schema for arguments
        - execute: Async method that performs the backing call and reshape

    execute() receives arguments that already passed schema validation
    and raises ToolError subclasses on failure.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for the tool."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        ...

    @property
    @abstractmethod
    def input_schema(self) -> dict[str, Any]:
        """
        JSON Schema defining expected input arguments.

        Must be a JSON Schema object with:
        - type: "object"
        - properties: dict of parameter definitions
        - required: list of required parameter names

        Supported property keywords: type (string, integer, number,
        boolean), description, default, minimum, maximum, minLength,
        maxLength.
        """
        ...

    @property
    def annotations(self) -> ToolAnnotations:
        """Behavioral hints for the tool."""
        return READ_ONLY_REMOTE

    @property
    def descriptor(self) -> ToolDescriptor:
        """Immutable listing entry for this tool."""
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
            annotations=self.annotations,
        )

    @abstractmethod
    async def execute(self, arguments: ToolArguments) -> ToolResult:
        """
        Execute the tool with validated arguments.

        Args:
            arguments: Immutable record produced from input_schema

        Returns:
            ToolResult with the reshaped backing response

        Raises:
            ToolError: On any backing-service or response-shape failure
        """
        ...

    def __repr__(self) -> str:
        return f"<Tool {self.name}>"
