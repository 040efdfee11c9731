"""
Stdio Transport.

Reads newline-delimited frames from standard input through an asyncio
StreamReader (so reads can be cancelled on shutdown) and writes frames
to standard output.

Usage:
    transport = await StdioTransport.connect()
    while (line := await transport.read_message()) is not None:
        await transport.write_message(handle(line))
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import IO

logger = logging.getLogger(__name__)

# Tool results (whole files, MR diffs) can produce very long lines
STREAM_LIMIT = 16 * 1024 * 1024


class StdioTransport:
    """
    Transport over a byte stream reader and a text writer.

    Example:
        reader = asyncio.StreamReader()
        reader.feed_data(b'{"jsonrpc": "2.0", "id": 1, "method": "ping"}\\n')
        reader.feed_eof()
        transport = StdioTransport(reader, io.StringIO())
    """

    def __init__(self, reader: asyncio.StreamReader, writer: IO[str]):
        self._reader = reader
        self._writer = writer
        self._closed = False

    @classmethod
    async def connect(
        cls,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> StdioTransport:
        """
        Attach to the process's standard streams.

        Pipes and terminals are read asynchronously. A regular file
        redirected to stdin cannot be watched by the event loop, so its
        contents are read up front.
        """
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout

        loop = asyncio.get_running_loop()
        reader = asyncio.StreamReader(limit=STREAM_LIMIT)
        try:
            await loop.connect_read_pipe(
                lambda: asyncio.StreamReaderProtocol(reader),
                stdin,
            )
        except ValueError:
            logger.debug("[stdio] stdin is a regular file, reading it eagerly")
            reader.feed_data(stdin.buffer.read())
            reader.feed_eof()

        return cls(reader, stdout)

    @property
    def channel_id(self) -> str:
        return "stdio"

    async def read_message(self) -> str | None:
        if self._closed:
            return None

        line = await self._reader.readline()
        if not line:
            return None
        return line.decode("utf-8").rstrip("\r\n")

    async def write_message(self, message: str) -> None:
        if self._closed:
            raise RuntimeError("Transport is closed")
        self._writer.write(message + "\n")
        self._writer.flush()

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._writer.flush()
        except ValueError:
            # Writer already closed by the runtime
            pass

    def __repr__(self) -> str:
        return f"<StdioTransport closed={self._closed}>"
