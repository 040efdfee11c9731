"""
GitHub Read File Tool.

Fetches a single file at path@ref and returns its decoded text.
Anything other than a single-file payload (a directory listing, a
submodule without content) is reported as an internal error.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import TYPE_CHECKING, Any

from toolgate.integrations.base import IntegrationError
from toolgate.integrations.github import ContentEntry
from toolgate.tools.base import ToolResult
from toolgate.tools.errors import InternalToolError

from .base import GitHubTool

if TYPE_CHECKING:
    from toolgate.tools.validation import ToolArguments

logger = logging.getLogger(__name__)


class ReadFileTool(GitHubTool):
    """Read a file from a GitHub repository."""

    @property
    def name(self) -> str:
        return "read_file"

    @property
    def description(self) -> str:
        return "Read a file from a GitHub repository"

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
                    "description": "File path in the repository",
                },
                "ref": {
                    "type": "string",
                    "description": "Git reference (branch, tag, or commit SHA)",
                    "default": "main",
                },
            },
            "required": ["owner", "repo", "path"],
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

        if not isinstance(content, ContentEntry) or content.content is None:
            raise InternalToolError("Invalid response format from GitHub API")

        try:
            text = base64.b64decode(content.content).decode("utf-8", errors="replace")
        except binascii.Error as e:
            raise InternalToolError(f"{self.error_prefix}could not decode {content.path}: {e}") from e

        logger.info(f"[read_file] Read {len(text)} character(s) from {content.path}")
        return ToolResult.success(text)
