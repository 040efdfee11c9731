"""
Adapter settings.

Settings are read once from the process environment at startup and
passed explicitly to the client and server builders; nothing reads the
environment after that.

Security:
    The credential uses SecretStr to prevent accidental logging.
    Access the value with `.get_secret_value()`.

Environment:
    search: BRAVE_API_KEY (required)
    github: GITHUB_TOKEN (required)
    gitlab: GITLAB_TOKEN (required), GITLAB_URL (default https://gitlab.com)

    All adapters:
    TOOLGATE_LOG_LEVEL (default INFO)
    TOOLGATE_LOG_FORMAT (text or json, default text)
    TOOLGATE_HTTP_TIMEOUT (seconds, default 30)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator


class ConfigurationError(Exception):
    """Raised when the environment cannot produce valid settings."""

    pass


class AdapterName(str, Enum):
    """The adapters this package can run."""

    SEARCH = "search"
    GITHUB = "github"
    GITLAB = "gitlab"


CREDENTIAL_ENV: dict[AdapterName, str] = {
    AdapterName.SEARCH: "BRAVE_API_KEY",
    AdapterName.GITHUB: "GITHUB_TOKEN",
    AdapterName.GITLAB: "GITLAB_TOKEN",
}

# Only GitLab may point at a self-hosted instance
BASE_URL_ENV: dict[AdapterName, tuple[str, str]] = {
    AdapterName.GITLAB: ("GITLAB_URL", "https://gitlab.com"),
}


class AdapterSettings(BaseModel):
    """
    Settings for one adapter process.

    Immutable once built.
    """

    model_config = ConfigDict(frozen=True)

    adapter: AdapterName
    credential: SecretStr = Field(..., description="API key or token for the backing service")
    base_url: str | None = Field(None, description="Backing service URL override")
    http_timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("credential")
    @classmethod
    def _credential_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("credential must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return normalized

    @field_validator("log_format")
    @classmethod
    def _known_log_format(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"text", "json"}:
            raise ValueError("log format must be 'text' or 'json'")
        return normalized

    @property
    def credential_env(self) -> str:
        """Name of the environment variable the credential came from."""
        return CREDENTIAL_ENV[self.adapter]


def load_settings(
    adapter: AdapterName | str,
    environ: Mapping[str, str] | None = None,
) -> AdapterSettings:
    """
    Build settings for an adapter from environment variables.

    Args:
        adapter: Adapter name
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Validated AdapterSettings

    Raises:
        ConfigurationError: If the credential is missing or a value is invalid
    """
    env = os.environ if environ is None else environ

    try:
        adapter = AdapterName(adapter)
    except ValueError:
        raise ConfigurationError(f"Unknown adapter: {adapter}") from None

    credential_var = CREDENTIAL_ENV[adapter]
    credential = env.get(credential_var, "").strip()
    if not credential:
        raise ConfigurationError(f"{credential_var} environment variable is required")

    base_url: str | None = None
    if adapter in BASE_URL_ENV:
        url_var, default_url = BASE_URL_ENV[adapter]
        base_url = env.get(url_var, "").strip() or default_url

    try:
        return AdapterSettings(
            adapter=adapter,
            credential=SecretStr(credential),
            base_url=base_url,
            http_timeout=env.get("TOOLGATE_HTTP_TIMEOUT", "30"),
            log_level=env.get("TOOLGATE_LOG_LEVEL", "INFO").upper(),
            log_format=env.get("TOOLGATE_LOG_FORMAT", "text"),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
