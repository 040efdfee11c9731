"""
Brave Search API Client.

Usage:
    async with BraveSearchClient(config) as client:
        response = await client.web_search("python asyncio", count=5)
        for result in response.results:
            print(result.title, result.url)

API Reference:
    https://api.search.brave.com/app/documentation/web-search/get-started
"""

from __future__ import annotations

import logging

from toolgate.integrations.base import IntegrationClient
from toolgate.integrations.brave.schemas import WebSearchResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.search.brave.com"
WEB_SEARCH_PATH = "/res/v1/web/search"


class BraveSearchClient(IntegrationClient):
    """
    Async client for the Brave web search endpoint.

    Authenticates with the X-Subscription-Token header.
    """

    @property
    def name(self) -> str:
        return "brave"

    def _get_auth_headers(self) -> dict[str, str]:
        return {"X-Subscription-Token": self.config.access_token}

    async def web_search(self, query: str, *, count: int = 5) -> WebSearchResponse:
        """
        Run a web search.

        Args:
            query: Search query
            count: Number of results to request

        Returns:
            Parsed search response
        """
        logger.info(f"[brave] Searching web: count={count}")

        response = await self._request(
            "GET",
            WEB_SEARCH_PATH,
            params={
                "q": query,
                "count": count,
                "text_decorations": "false",
                "text_format": "plain",
            },
        )

        return self._parse(WebSearchResponse, self._json(response))
