"""
Brave Web Search Tool.

Wraps BraveSearchClient.web_search() and reshapes each result to
{title, url, description}.

Usage:
    tool = BraveWebSearchTool(client)
    result = await tool.execute(arguments)  # arguments.query, arguments.count
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from toolgate.integrations.base import IntegrationError
from toolgate.integrations.brave import BraveSearchClient
from toolgate.tools.base import ToolAnnotations, ToolResult
from toolgate.tools.remote import RemoteTool

if TYPE_CHECKING:
    from toolgate.tools.validation import ToolArguments

logger = logging.getLogger(__name__)

NO_RESULTS_TEXT = "No results found."


class BraveWebSearchTool(RemoteTool[BraveSearchClient]):
    """Search the internet using Brave Search."""

    error_prefix = "Search failed: "

    @property
    def name(self) -> str:
        return "search"

    @property
    def description(self) -> str:
        return "Search the internet using Brave Search"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "The search query",
                    "minLength": 1,
                },
                "count": {
                    "type": "integer",
                    "description": "Number of results to return (1-20)",
                    "minimum": 1,
                    "maximum": 20,
                    "default": 5,
                },
            },
            "required": ["query"],
        }

    @property
    def annotations(self) -> ToolAnnotations:
        return ToolAnnotations(
            title="Web Search",
            read_only_hint=True,
            open_world_hint=True,
        )

    @property
    def auth_failure_message(self) -> str:
        return (
            "Search failed: Please visit https://api.search.brave.com "
            "to get started with Brave Search API"
        )

    async def execute(self, arguments: ToolArguments) -> ToolResult:
        try:
            response = await self._client.web_search(arguments.query, count=arguments.count)
        except IntegrationError as e:
            raise self.translate_error(e) from e

        if not response.results:
            return ToolResult.success(NO_RESULTS_TEXT)

        results = [
            {
                "title": result.title,
                "url": result.url,
                "description": result.description,
            }
            for result in response.results
        ]
        logger.info(f"[search] Returning {len(results)} result(s)")
        return ToolResult.from_json(results)
