"""
GitHub API Client.

Usage:
    async with GitHubClient(config) as client:
        content = await client.get_content("octocat", "hello-world", "README", ref="main")
        matches = await client.search_code("addClass repo:jquery/jquery")

API Reference:
    https://docs.github.com/en/rest/repos/contents
    https://docs.github.com/en/rest/search/search#search-code
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from toolgate.integrations.base import IntegrationClient
from toolgate.integrations.github.schemas import (
    CodeSearchResponse,
    RepositoryContent,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
API_VERSION = "2022-11-28"


class GitHubClient(IntegrationClient):
    """
    Async client for the GitHub REST API.

    Authenticates with a bearer token.
    """

    @property
    def name(self) -> str:
        return "github"

    def _get_auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.config.access_token}"}

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": "toolgate-github",
        }

    async def get_content(
        self,
        owner: str,
        repo: str,
        path: str = "",
        *,
        ref: str | None = None,
    ) -> RepositoryContent:
        """
        Fetch repository content at path@ref.

        Args:
            owner: Repository owner
            repo: Repository name
            path: File or directory path ("" for the root)
            ref: Branch, tag or commit SHA

        Returns:
            A single ContentEntry for a file, a list for a directory
        """
        url = f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contents"
        normalized_path = path.strip("/")
        if normalized_path:
            url = f"{url}/{quote(normalized_path, safe='/')}"

        logger.info(f"[github] Fetching content: {owner}/{repo}/{normalized_path}@{ref}")

        response = await self._request(
            "GET",
            url,
            params={"ref": ref} if ref else None,
        )

        return self._parse(RepositoryContent, self._json(response))

    async def search_code(self, query: str, *, per_page: int = 10) -> CodeSearchResponse:
        """
        Search code across repositories.

        Args:
            query: Search query including any qualifiers
            per_page: Maximum number of matches to return

        Returns:
            Parsed search response
        """
        logger.info(f"[github] Searching code: {query!r}")

        response = await self._request(
            "GET",
            "/search/code",
            params={"q": query, "per_page": per_page},
        )

        return self._parse(CodeSearchResponse, self._json(response))
