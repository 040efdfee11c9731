"""
Base classes for backing-service clients.

Brave, GitHub and GitLab clients share one request path: a lazily
created httpx.AsyncClient, one attempt per call (no retry or backoff),
status mapping, and pydantic parsing of the decoded body. Tests swap the
httpx transport for httpx.MockTransport.

Error Mapping:
    - 401/403: AuthenticationError
    - 404: NotFoundError
    - 429: RateLimitError
    - other non-2xx, timeouts, network errors, bad JSON: IntegrationError
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class IntegrationError(Exception):
    """A backing-service call failed; `integration` names the service."""

    def __init__(
        self,
        message: str,
        integration: str,
        *,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.integration = integration
        self.status_code = status_code
        self.response_body = response_body

    @property
    def message(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        parts = [f"[{self.integration}] {self.message}"]
        if self.status_code:
            parts.append(f"(status={self.status_code})")
        return " ".join(parts)


class AuthenticationError(IntegrationError):
    """The service rejected the credential (401/403)."""

    pass


class RateLimitError(IntegrationError):
    """The service throttled the call (429). Never retried."""

    def __init__(
        self,
        message: str,
        integration: str,
        *,
        retry_after: float | None = None,
        **kwargs,
    ):
        super().__init__(message, integration, **kwargs)
        self.retry_after = retry_after


class NotFoundError(IntegrationError):
    """Repository, file, project or merge request does not exist (404)."""

    pass


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class IntegrationConfig:
    """Credential and connection settings for one backing service."""

    # Authentication
    access_token: str = ""

    # Connection
    base_url: str = ""
    timeout: float = 30.0

    # Observability
    log_requests: bool = False
    log_responses: bool = False

    def __post_init__(self):
        if not self.access_token:
            raise ValueError("Access token is required")
        if not self.base_url:
            raise ValueError("Base URL is required")


# =============================================================================
# Base Client
# =============================================================================

M = TypeVar("M")


def _parse_retry_after(value: str | None) -> float | None:
    """
    Seconds to wait from a Retry-After header.

    The header is either a delay in seconds or an HTTP-date. Dates in the
    past give 0.0; anything unparseable gives None.
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        pass
    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    return max(0.0, (retry_at - datetime.now(timezone.utc)).total_seconds())


class IntegrationClient(ABC):
    """
    One backing service behind an httpx.AsyncClient.

    The AsyncClient is created on first use and reused until close().
    Subclasses provide `name` (used in logs and errors) and
    `_get_auth_headers()`; they may extend `_get_default_headers()`.
    """

    def __init__(
        self,
        config: IntegrationConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            config: Credential, base URL and timeout
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name used in logs and error messages."""
        ...

    @abstractmethod
    def _get_auth_headers(self) -> dict[str, str]:
        """Headers carrying the credential."""
        ...

    def _get_default_headers(self) -> dict[str, str]:
        """Headers sent with every request; override to add API-specific ones."""
        return {"Accept": "application/json"}

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                transport=self._transport,
                headers={
                    **self._get_default_headers(),
                    **self._get_auth_headers(),
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Execute a single HTTP request.

        Args:
            method: HTTP method
            path: URL path (appended to base_url)
            params: Query parameters
            headers: Additional headers

        Returns:
            httpx.Response with a 2xx status

        Raises:
            IntegrationError: On any transport failure or non-2xx status
        """
        client = await self._get_client()

        if self.config.log_requests:
            logger.debug(f"[{self.name}] {method} {path} params={params}")

        try:
            response = await client.request(
                method=method,
                url=path,
                params=params,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise IntegrationError(f"Request timeout: {e}", self.name) from e
        except httpx.HTTPError as e:
            raise IntegrationError(f"Network error: {e}", self.name) from e

        if self.config.log_responses:
            logger.debug(
                f"[{self.name}] Response: status={response.status_code} "
                f"body={response.text[:500] if response.text else 'empty'}"
            )

        self._check_response(response)
        return response

    def _check_response(self, response: httpx.Response) -> None:
        """
        Check response for errors and raise appropriate exceptions.

        Raises:
            AuthenticationError: For 401/403
            RateLimitError: For 429
            NotFoundError: For 404
            IntegrationError: For other errors
        """
        if response.is_success:
            return

        status = response.status_code
        body = response.text

        if status == 401 or status == 403:
            raise AuthenticationError(
                f"Authentication failed: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "Rate limit exceeded",
                self.name,
                status_code=status,
                response_body=body,
                retry_after=_parse_retry_after(retry_after),
            )

        if status == 404:
            raise NotFoundError(
                f"Resource not found: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        raise IntegrationError(
            f"Request failed with status code {status}: {body}",
            self.name,
            status_code=status,
            response_body=body,
        )

    def _json(self, response: httpx.Response) -> Any:
        """Decode a JSON body, mapping decode failures to IntegrationError."""
        try:
            return response.json()
        except ValueError as e:
            raise IntegrationError(f"Invalid JSON in response: {e}", self.name) from e

    def _parse(self, model: type[M], data: Any) -> M:
        """
        Validate decoded JSON against a pydantic model or type.

        Raises:
            IntegrationError: If the payload does not have the expected shape
        """
        try:
            return TypeAdapter(model).validate_python(data)
        except PydanticValidationError as e:
            raise IntegrationError(
                f"Unexpected response shape: {e.error_count()} validation error(s)",
                self.name,
            ) from e

    async def __aenter__(self) -> IntegrationClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
