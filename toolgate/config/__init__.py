"""
Configuration for toolgate adapters.
"""

from .settings import (
    CREDENTIAL_ENV,
    AdapterName,
    AdapterSettings,
    ConfigurationError,
    load_settings,
)

__all__ = [
    "AdapterName",
    "AdapterSettings",
    "CREDENTIAL_ENV",
    "ConfigurationError",
    "load_settings",
]
