"""
Invocation error taxonomy.

Every failed tool invocation ends as one of three kinds, each carrying
the JSON-RPC error code it is reported with:

- MethodNotFound: the tool name is not registered (caller error)
- InvalidParams: arguments failed schema validation (caller error)
- InternalError: everything else (network, auth, response shape)

None of these are retried; the adapter reports them and keeps serving.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Error kinds with their JSON-RPC codes."""

    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    @property
    def code(self) -> int:
        return self.value


class ToolError(Exception):
    """Base exception for invocation failures."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-RPC error object."""
        return {"code": self.kind.code, "message": self.message}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class MethodNotFoundError(ToolError):
    """Raised when the requested tool is not registered."""

    kind = ErrorKind.METHOD_NOT_FOUND


class InvalidParamsError(ToolError):
    """Raised when arguments do not satisfy the tool's input schema."""

    kind = ErrorKind.INVALID_PARAMS


class InternalToolError(ToolError):
    """Raised for backing-service, network and response-shape failures."""

    kind = ErrorKind.INTERNAL_ERROR
