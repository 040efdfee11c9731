"""
GitLab Merge Request Content Tool.

Fetches merge request metadata and its full diff set, then merges them
into a single JSON document:

    {
        "id", "iid", "title", "description", "state",
        "source_branch", "target_branch",
        "changes": [{"old_path", "new_path", "diff"}, ...]
    }
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from toolgate.integrations.base import IntegrationError
from toolgate.integrations.gitlab import GitLabClient
from toolgate.tools.base import ToolResult
from toolgate.tools.remote import RemoteTool

if TYPE_CHECKING:
    from toolgate.tools.validation import ToolArguments

logger = logging.getLogger(__name__)


class MergeRequestContentTool(RemoteTool[GitLabClient]):
    """Get the content of a merge request including its changes."""

    error_prefix = "GitLab API error: "

    @property
    def name(self) -> str:
        return "get_merge_request_content"

    @property
    def description(self) -> str:
        return "Get the content of a merge request including its changes"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "project_id": {
                    "type": "string",
                    "description": "The ID or URL-encoded path of the project",
                },
                "merge_request_iid": {
                    "type": "integer",
                    "description": "The internal ID of the merge request",
                    "minimum": 1,
                },
            },
            "required": ["project_id", "merge_request_iid"],
        }

    @property
    def auth_failure_message(self) -> str:
        base_url = self._client.config.base_url.rstrip("/")
        return (
            f"{self.error_prefix}authentication failed; create a personal access token at "
            f"{base_url}/-/user_settings/personal_access_tokens and export it as GITLAB_TOKEN"
        )

    async def execute(self, arguments: ToolArguments) -> ToolResult:
        project_id = arguments.project_id
        iid = arguments.merge_request_iid

        try:
            merge_request = await self._client.get_merge_request(project_id, iid)
            diffs = await self._client.list_merge_request_diffs(project_id, iid)
        except IntegrationError as e:
            raise self.translate_error(e) from e

        logger.info(f"[merge_request] {project_id}!{iid} has {len(diffs)} change(s)")

        return ToolResult.from_json(
            {
                "id": merge_request.id,
                "iid": merge_request.iid,
                "title": merge_request.title,
                "description": merge_request.description,
                "state": merge_request.state,
                "source_branch": merge_request.source_branch,
                "target_branch": merge_request.target_branch,
                "changes": [
                    {
                        "old_path": diff.old_path,
                        "new_path": diff.new_path,
                        "diff": diff.diff,
                    }
                    for diff in diffs
                ],
            }
        )
