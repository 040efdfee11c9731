"""
Base class for tools backed by an integration client.

Translates integration failures at the tool boundary so raw transport
exceptions never reach the dispatcher:

- AuthenticationError -> InternalError with an actionable message
- any other IntegrationError -> InternalError with the original message
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from toolgate.integrations.base import AuthenticationError, IntegrationClient, IntegrationError

from .base import Tool
from .errors import InternalToolError

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=IntegrationClient)


class RemoteTool(Tool, Generic[C]):
    """
    Tool that performs its work through one integration client.

    Subclasses set error_prefix and override auth_failure_message.
    """

    error_prefix: str = ""

    def __init__(self, client: C):
        self._client = client

    @property
    def client(self) -> C:
        return self._client

    @property
    def auth_failure_message(self) -> str:
        """Message reported when the backing service rejects the credential."""
        return f"{self.error_prefix}authentication failed"

    def translate_error(self, error: IntegrationError) -> InternalToolError:
        """Map an integration failure to the invocation taxonomy."""
        if isinstance(error, AuthenticationError):
            logger.warning(f"[{self.name}] Credential rejected: {error}")
            return InternalToolError(self.auth_failure_message)

        logger.warning(f"[{self.name}] Backing call failed: {error}")
        return InternalToolError(f"{self.error_prefix}{error.message}")

    def __repr__(self) -> str:
        return f"<Tool {self.name} client={self._client.name}>"
