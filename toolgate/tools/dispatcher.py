"""
Tool Dispatcher.

Routes one invocation to its tool:

1. Resolve the tool name (MethodNotFound if unknown)
2. Validate arguments against the tool's schema (InvalidParams)
3. Execute the tool
4. Wrap any non-ToolError failure as InternalError

Validation always completes before the tool runs, so unknown names and
malformed arguments never cause an outbound call.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .errors import InternalToolError, ToolError

if TYPE_CHECKING:
    from .base import ToolResult
    from .registry import ToolRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """A single request to run one tool with an argument bag."""

    tool_name: str
    arguments: Mapping[str, Any] | None = field(default_factory=dict)


class ToolDispatcher:
    """
    Validates and executes invocations against a ToolRegistry.

    Example:
        dispatcher = ToolDispatcher(registry)
        result = await dispatcher.invoke(
            InvocationRequest("search", {"query": "python asyncio"})
        )
    """

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def invoke(self, request: InvocationRequest) -> ToolResult:
        """
        Run one invocation to completion.

        Args:
            request: Tool name and raw arguments

        Returns:
            The tool's ToolResult, unchanged

        Raises:
            MethodNotFoundError: Unknown tool name
            InvalidParamsError: Arguments failed validation
            InternalToolError: Any other failure
        """
        tool = self._registry.get_required(request.tool_name)
        arguments = self._registry.validate_arguments(request.tool_name, request.arguments)

        started = time.perf_counter()
        try:
            result = await tool.execute(arguments)
        except ToolError as e:
            logger.warning(f"[dispatcher] {tool.name} failed: {e.message}")
            raise
        except Exception as e:
            logger.error(f"[dispatcher] {tool.name} raised unexpectedly: {e}", exc_info=True)
            raise InternalToolError(str(e) or type(e).__name__) from e

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(f"[dispatcher] {tool.name} completed in {duration_ms:.1f}ms")
        return result
