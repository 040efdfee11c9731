"""
GitHub List Repository Content Tool.

Lists a directory at path@ref as {name, type, path, size} entries.
A path that resolves to a single file is an error, not a one-item list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from toolgate.integrations.base import IntegrationError
from toolgate.tools.base import ToolResult
from toolgate.tools.errors import InternalToolError

from .base import GitHubTool

if TYPE_CHECKING:
    from toolgate.tools.validation import ToolArguments


class ListRepositoryContentTool(GitHubTool):
    """List contents of a repository directory."""

    @property
    def name(self) -> str:
        return "list_repository_content"

    @property
    def description(self) -> str:
        return "List contents of a repository directory"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "owner": {
                    "type": "string",
                    "description": "Repository owner",
                },
                "repo": {
                    "type": "string",
                    "description": "Repository name",
                },
                "path": {
                    "type": "string",
                    "description": "Directory path in the repository",
                    "default": "",
                },
                "ref": {
                    "type": "string",
                    "description": "Git reference (branch, tag, or commit SHA)",
                    "default": "main",
                },
            },
            "required": ["owner", "repo"],
        }

    async def execute(self, arguments: ToolArguments) -> ToolResult:
        try:
            content = await self._client.get_content(
                arguments.owner,
                arguments.repo,
                arguments.path,
                ref=arguments.ref,
            )
        except IntegrationError as e:
            raise self.translate_error(e) from e

        if not isinstance(content, list):
            raise InternalToolError("Expected directory listing")

        return ToolResult.from_json(
            [
                {
                    "name": entry.name,
                    "type": entry.type,
                    "path": entry.path,
                    "size": entry.size,
                }
                for entry in content
            ]
        )
