"""
Backing-service clients.

Each integration follows a consistent pattern:

1. Client: Handles authentication and API communication
2. Schemas: Pydantic models for the response fields the tools reshape

Directory Structure:
    integrations/
    ├── base.py           # Base client, config and error mapping
    ├── brave/            # Brave web search
    ├── github/           # GitHub contents and code search
    └── gitlab/           # GitLab merge requests
"""

from toolgate.integrations.base import (
    AuthenticationError,
    IntegrationClient,
    IntegrationConfig,
    IntegrationError,
    NotFoundError,
    RateLimitError,
)

__all__ = [
    "AuthenticationError",
    "IntegrationClient",
    "IntegrationConfig",
    "IntegrationError",
    "NotFoundError",
    "RateLimitError",
]
