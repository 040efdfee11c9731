"""
Transport Protocol for toolgate.

A transport moves encoded protocol frames between the adapter and the
orchestrating caller. It knows nothing about tools: it reads one frame,
hands it to the server, and writes back whatever the server returns.

Implementations:
- StdioTransport: newline-delimited frames on stdin/stdout
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """
    Line-oriented, bidirectional channel to the caller.

    Contract:
        - read_message() returns one frame without its line terminator,
          or None once the channel is closed
        - write_message() writes exactly one frame and flushes it
        - close() is idempotent
    """

    @property
    def channel_id(self) -> str:
        """Identifier for this channel, used in logs (e.g. "stdio")."""
        ...

    async def read_message(self) -> str | None:
        """Read the next frame, or None at end of stream."""
        ...

    async def write_message(self, message: str) -> None:
        """Write one frame."""
        ...

    async def close(self) -> None:
        """Release the channel."""
        ...
