"""
Brave Search Integration.

Usage:
    from toolgate.integrations.base import IntegrationConfig
    from toolgate.integrations.brave import BraveSearchClient, DEFAULT_BASE_URL

    client = BraveSearchClient(IntegrationConfig(
        access_token="BSA...",
        base_url=DEFAULT_BASE_URL,
    ))
    response = await client.web_search("python", count=5)
"""

from toolgate.integrations.brave.client import DEFAULT_BASE_URL, BraveSearchClient
from toolgate.integrations.brave.schemas import WebResult, WebSearchResponse

__all__ = [
    "BraveSearchClient",
    "DEFAULT_BASE_URL",
    "WebResult",
    "WebSearchResponse",
]
