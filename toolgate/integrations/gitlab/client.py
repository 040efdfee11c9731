"""
GitLab API Client.

Works against gitlab.com or a self-hosted instance (base_url).

Usage:
    async with GitLabClient(config) as client:
        mr = await client.get_merge_request("group/project", 42)
        diffs = await client.list_merge_request_diffs("group/project", 42)

API Reference:
    https://docs.gitlab.com/ee/api/merge_requests.html
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from toolgate.integrations.base import IntegrationClient
from toolgate.integrations.gitlab.schemas import MergeRequest, MergeRequestDiff

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://gitlab.com"
DIFFS_PER_PAGE = 100


class GitLabClient(IntegrationClient):
    """
    Async client for the GitLab REST API.

    Authenticates with the PRIVATE-TOKEN header.
    """

    @property
    def name(self) -> str:
        return "gitlab"

    def _get_auth_headers(self) -> dict[str, str]:
        return {"PRIVATE-TOKEN": self.config.access_token}

    def _merge_request_path(self, project_id: str, merge_request_iid: int) -> str:
        # Project paths like "group/project" must be sent URL-encoded
        return f"/api/v4/projects/{quote(project_id, safe='')}/merge_requests/{merge_request_iid}"

    async def get_merge_request(self, project_id: str, merge_request_iid: int) -> MergeRequest:
        """
        Fetch merge request metadata.

        Args:
            project_id: Numeric ID or full path of the project
            merge_request_iid: Project-scoped merge request ID

        Returns:
            Merge request details
        """
        logger.info(f"[gitlab] Fetching merge request {project_id}!{merge_request_iid}")

        response = await self._request(
            "GET",
            self._merge_request_path(project_id, merge_request_iid),
        )

        return self._parse(MergeRequest, self._json(response))

    async def list_merge_request_diffs(
        self,
        project_id: str,
        merge_request_iid: int,
    ) -> list[MergeRequestDiff]:
        """
        Fetch every diff of a merge request, following pagination.

        Args:
            project_id: Numeric ID or full path of the project
            merge_request_iid: Project-scoped merge request ID

        Returns:
            Diffs in the order GitLab returns them
        """
        path = f"{self._merge_request_path(project_id, merge_request_iid)}/diffs"
        diffs: list[MergeRequestDiff] = []
        page: str | None = "1"

        while page:
            response = await self._request(
                "GET",
                path,
                params={"page": page, "per_page": DIFFS_PER_PAGE},
            )
            diffs.extend(self._parse(list[MergeRequestDiff], self._json(response)))
            page = response.headers.get("X-Next-Page") or None

        logger.info(f"[gitlab] Fetched {len(diffs)} diff(s) for {project_id}!{merge_request_iid}")
        return diffs
