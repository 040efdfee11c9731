"""
Shared behaviour for GitHub tools.
"""

from __future__ import annotations

from toolgate.integrations.github import GitHubClient
from toolgate.tools.remote import RemoteTool

TOKEN_SETTINGS_URL = "https://github.com/settings/tokens"


class GitHubTool(RemoteTool[GitHubClient]):
    """Base for tools backed by the GitHub REST API."""

    error_prefix = "GitHub API error: "

    @property
    def auth_failure_message(self) -> str:
        return (
            f"{self.error_prefix}authentication failed; create a token at "
            f"{TOKEN_SETTINGS_URL} and export it as GITHUB_TOKEN"
        )
