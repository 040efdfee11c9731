"""
Transport Layer for toolgate.

Transports carry JSON-RPC frames between an adapter and its caller.
"""

from .jsonrpc import (
    INVALID_REQUEST,
    PARSE_ERROR,
    JsonRpcError,
    JsonRpcRequest,
    decode_request,
    encode_error,
    encode_result,
)
from .protocol import Transport
from .stdio import StdioTransport

__all__ = [
    "INVALID_REQUEST",
    "JsonRpcError",
    "JsonRpcRequest",
    "PARSE_ERROR",
    "StdioTransport",
    "Transport",
    "decode_request",
    "encode_error",
    "encode_result",
]
