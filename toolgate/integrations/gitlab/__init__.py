"""
GitLab Integration.

Read-only access to merge requests and their diffs.
"""

from toolgate.integrations.gitlab.client import DEFAULT_BASE_URL, GitLabClient
from toolgate.integrations.gitlab.schemas import MergeRequest, MergeRequestDiff

__all__ = [
    "DEFAULT_BASE_URL",
    "GitLabClient",
    "MergeRequest",
    "MergeRequestDiff",
]
