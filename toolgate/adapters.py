"""
Adapter builders.

Each builder turns AdapterSettings into a ready-to-serve ToolServer:
client -> tools -> registry -> dispatcher -> server. The settings value
is the only source of credentials; builders never read the environment.

Usage:
    settings = load_settings("github")
    server = build_server(settings)
    await server.serve()
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from toolgate.config import AdapterName, AdapterSettings
from toolgate.integrations.base import IntegrationConfig
from toolgate.integrations.brave import DEFAULT_BASE_URL as BRAVE_BASE_URL
from toolgate.integrations.brave import BraveSearchClient
from toolgate.integrations.github import DEFAULT_BASE_URL as GITHUB_BASE_URL
from toolgate.integrations.github import GitHubClient
from toolgate.integrations.gitlab import DEFAULT_BASE_URL as GITLAB_BASE_URL
from toolgate.integrations.gitlab import GitLabClient
from toolgate.server import ToolServer, TransportFactory
from toolgate.tools import ToolDispatcher, ToolRegistry
from toolgate.tools.github import ListRepositoryContentTool, ReadFileTool, SearchCodeTool
from toolgate.tools.gitlab import MergeRequestContentTool
from toolgate.tools.search import BraveWebSearchTool
from toolgate.transports import StdioTransport

logger = logging.getLogger(__name__)


def _integration_config(settings: AdapterSettings, default_base_url: str) -> IntegrationConfig:
    return IntegrationConfig(
        access_token=settings.credential.get_secret_value(),
        base_url=settings.base_url or default_base_url,
        timeout=settings.http_timeout,
        log_requests=settings.log_level == "DEBUG",
        log_responses=settings.log_level == "DEBUG",
    )


def build_search_server(
    settings: AdapterSettings,
    *,
    transport_factory: TransportFactory = StdioTransport.connect,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> ToolServer:
    """Web search adapter: one `search` tool backed by Brave Search."""
    client = BraveSearchClient(
        _integration_config(settings, BRAVE_BASE_URL),
        transport=http_transport,
    )

    registry = ToolRegistry()
    registry.register(BraveWebSearchTool(client))

    return ToolServer(
        name="search-server",
        dispatcher=ToolDispatcher(registry),
        transport_factory=transport_factory,
        clients=[client],
    )


def build_github_server(
    settings: AdapterSettings,
    *,
    transport_factory: TransportFactory = StdioTransport.connect,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> ToolServer:
    """Source-hosting adapter: read_file, search_code, list_repository_content."""
    client = GitHubClient(
        _integration_config(settings, GITHUB_BASE_URL),
        transport=http_transport,
    )

    registry = ToolRegistry()
    registry.register(ReadFileTool(client))
    registry.register(SearchCodeTool(client))
    registry.register(ListRepositoryContentTool(client))

    return ToolServer(
        name="github-server",
        dispatcher=ToolDispatcher(registry),
        transport_factory=transport_factory,
        clients=[client],
    )


def build_gitlab_server(
    settings: AdapterSettings,
    *,
    transport_factory: TransportFactory = StdioTransport.connect,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> ToolServer:
    """DevOps adapter: get_merge_request_content."""
    client = GitLabClient(
        _integration_config(settings, GITLAB_BASE_URL),
        transport=http_transport,
    )

    registry = ToolRegistry()
    registry.register(MergeRequestContentTool(client))

    return ToolServer(
        name="gitlab-server",
        dispatcher=ToolDispatcher(registry),
        transport_factory=transport_factory,
        clients=[client],
    )


ServerBuilder = Callable[..., ToolServer]

BUILDERS: dict[AdapterName, ServerBuilder] = {
    AdapterName.SEARCH: build_search_server,
    AdapterName.GITHUB: build_github_server,
    AdapterName.GITLAB: build_gitlab_server,
}


def build_server(settings: AdapterSettings, **kwargs) -> ToolServer:
    """Build the server for settings.adapter."""
    server = BUILDERS[settings.adapter](settings, **kwargs)
    logger.debug(f"[adapters] Built {server!r}")
    return server
