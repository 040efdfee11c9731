"""
GitHub Code Search Tool.

Builds a search query from the free-text query plus optional
qualifiers and returns {repository, path, url} per match.

Qualifiers:
    language -> "language:<language>"
    owner + repo -> "repo:<owner>/<repo>"
    owner only -> "user:<owner>"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from toolgate.integrations.base import IntegrationError
from toolgate.tools.base import ToolResult

from .base import GitHubTool

if TYPE_CHECKING:
    from toolgate.tools.validation import ToolArguments

logger = logging.getLogger(__name__)

RESULTS_PER_PAGE = 10


def build_search_query(
    query: str,
    *,
    language: str | None = None,
    owner: str | None = None,
    repo: str | None = None,
) -> str:
    """Append GitHub search qualifiers to a free-text query."""
    parts = [query]
    if language:
        parts.append(f"language:{language}")
    if owner and repo:
        parts.append(f"repo:{owner}/{repo}")
    elif owner:
        parts.append(f"user:{owner}")
    return " ".join(parts)


class SearchCodeTool(GitHubTool):
    """Search for code across GitHub repositories."""

    @property
    def name(self) -> str:
        return "search_code"

    @property
    def description(self) -> str:
        return "Search for code across GitHub repositories"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query",
                },
                "language": {
                    "type": "string",
                    "description": "Programming language to filter by",
                },
                "owner": {
                    "type": "string",
                    "description": "Repository owner to limit search to",
                },
                "repo": {
                    "type": "string",
                    "description": "Repository name to limit search to",
                },
            },
            "required": ["query"],
        }

    async def execute(self, arguments: ToolArguments) -> ToolResult:
        query = build_search_query(
            arguments.query,
            language=arguments.language,
            owner=arguments.owner,
            repo=arguments.repo,
        )

        try:
            response = await self._client.search_code(query, per_page=RESULTS_PER_PAGE)
        except IntegrationError as e:
            raise self.translate_error(e) from e

        matches = [
            {
                "repository": item.repository.full_name,
                "path": item.path,
                "url": item.html_url,
            }
            for item in response.items
        ]
        logger.info(f"[search_code] {len(matches)} match(es) for {query!r}")
        return ToolResult.from_json(matches)
