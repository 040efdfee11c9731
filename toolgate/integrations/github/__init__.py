"""
GitHub Integration.

Read-only access to repository contents and code search.
"""

from toolgate.integrations.github.client import DEFAULT_BASE_URL, GitHubClient
from toolgate.integrations.github.schemas import (
    CodeSearchItem,
    CodeSearchResponse,
    ContentEntry,
    RepositoryContent,
)

__all__ = [
    "CodeSearchItem",
    "CodeSearchResponse",
    "ContentEntry",
    "DEFAULT_BASE_URL",
    "GitHubClient",
    "RepositoryContent",
]
