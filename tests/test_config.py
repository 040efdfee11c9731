"""
Tests for adapter settings.
"""

import pytest
from pydantic import ValidationError

from toolgate.config import AdapterName, AdapterSettings, ConfigurationError, load_settings


class TestLoadSettings:
    """Tests for load_settings()."""

    @pytest.mark.parametrize(
        "adapter, variable",
        [
            (AdapterName.SEARCH, "BRAVE_API_KEY"),
            (AdapterName.GITHUB, "GITHUB_TOKEN"),
            (AdapterName.GITLAB, "GITLAB_TOKEN"),
        ],
    )
    def test_missing_credential(self, adapter, variable):
        with pytest.raises(ConfigurationError, match=f"{variable} environment variable is required"):
            load_settings(adapter, {})

    def test_blank_credential_is_missing(self):
        with pytest.raises(ConfigurationError, match="BRAVE_API_KEY"):
            load_settings("search", {"BRAVE_API_KEY": "   "})

    def test_unknown_adapter(self):
        with pytest.raises(ConfigurationError, match="Unknown adapter: jira"):
            load_settings("jira", {})

    def test_search_settings(self, search_settings):
        assert search_settings.adapter == AdapterName.SEARCH
        assert search_settings.credential.get_secret_value() == "brave-test-key"
        assert search_settings.base_url is None
        assert search_settings.http_timeout == 30.0
        assert search_settings.log_level == "INFO"
        assert search_settings.log_format == "text"
        assert search_settings.credential_env == "BRAVE_API_KEY"

    def test_gitlab_url_default(self):
        settings = load_settings("gitlab", {"GITLAB_TOKEN": "glpat"})

        assert settings.base_url == "https://gitlab.com"

    def test_gitlab_url_override(self, gitlab_settings):
        assert gitlab_settings.base_url == "https://gitlab.example.test"

    def test_github_ignores_gitlab_url(self):
        settings = load_settings("github", {"GITHUB_TOKEN": "t", "GITLAB_URL": "https://x"})

        assert settings.base_url is None

    def test_ambient_overrides(self):
        settings = load_settings(
            "github",
            {
                "GITHUB_TOKEN": "t",
                "TOOLGATE_HTTP_TIMEOUT": "5.5",
                "TOOLGATE_LOG_LEVEL": "debug",
                "TOOLGATE_LOG_FORMAT": "JSON",
            },
        )

        assert settings.http_timeout == 5.5
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    @pytest.mark.parametrize(
        "variable, value",
        [
            ("TOOLGATE_HTTP_TIMEOUT", "0"),
            ("TOOLGATE_HTTP_TIMEOUT", "soon"),
            ("TOOLGATE_LOG_LEVEL", "LOUD"),
            ("TOOLGATE_LOG_FORMAT", "xml"),
        ],
    )
    def test_invalid_values(self, variable, value):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_settings("github", {"GITHUB_TOKEN": "t", variable: value})

    def test_credential_not_in_repr(self, github_settings):
        assert "ghp_test" not in repr(github_settings)

    def test_settings_are_immutable(self, github_settings):
        with pytest.raises(ValidationError):
            github_settings.http_timeout = 1.0

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("BRAVE_API_KEY", "from-env")

        settings = load_settings(AdapterName.SEARCH)

        assert settings.credential.get_secret_value() == "from-env"

    def test_direct_construction(self):
        settings = AdapterSettings(adapter="github", credential="t")

        assert settings.adapter == AdapterName.GITHUB
