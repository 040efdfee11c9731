"""
JSON-RPC 2.0 framing.

One JSON object per line. Requests carry an id and get exactly one
response; notifications carry no id and never get a response.

Channel-level error codes (the invocation codes -32601/-32602/-32603
live in toolgate.tools.errors):
    -32700 Parse error: the line is not valid JSON
    -32600 Invalid Request: valid JSON but not a request object
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

JSONRPC_VERSION = "2.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600

RequestId = StrictInt | StrictStr


class JsonRpcError(Exception):
    """Channel-level failure that becomes an error response."""

    def __init__(self, code: int, message: str, request_id: RequestId | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.request_id = request_id


class JsonRpcRequest(BaseModel):
    """A decoded request or notification."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId | None = None
    method: StrictStr
    params: dict[str, Any] | None = Field(default=None)

    @property
    def is_notification(self) -> bool:
        return self.id is None


def decode_request(line: str) -> JsonRpcRequest:
    """
    Parse one line into a request.

    Raises:
        JsonRpcError: PARSE_ERROR for bad JSON, INVALID_REQUEST for bad shape
    """
    try:
        payload = json.loads(line)
    except ValueError as e:
        raise JsonRpcError(PARSE_ERROR, f"Parse error: {e}") from e

    if not isinstance(payload, dict):
        raise JsonRpcError(INVALID_REQUEST, "Invalid Request: expected a JSON object")

    request_id = payload.get("id")
    if not isinstance(request_id, (int, str)) or isinstance(request_id, bool):
        request_id = None

    try:
        return JsonRpcRequest.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first.get("loc", ())) or "request"
        raise JsonRpcError(
            INVALID_REQUEST,
            f"Invalid Request: {field_name}: {first.get('msg')}",
            request_id,
        ) from e


def encode_result(request_id: RequestId, result: dict[str, Any]) -> str:
    """Encode a success response."""
    return json.dumps(
        {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result},
        ensure_ascii=False,
    )


def encode_error(request_id: RequestId | None, code: int, message: str) -> str:
    """Encode an error response; id is null when the request id is unknown."""
    return json.dumps(
        {
            "jsonrpc": JSONRPC_VERSION,
            "id": request_id,
            "error": {"code": code, "message": message},
        },
        ensure_ascii=False,
    )
