"""
Tool Server.

Binds a ToolDispatcher to a Transport and speaks the MCP subset the
orchestrator needs:

    initialize                  -> server info and capabilities
    notifications/initialized   -> (no response)
    ping                        -> {}
    tools/list                  -> {"tools": [...]}
    tools/call                  -> ToolResult or error

Requests are served strictly one at a time: the next frame is not read
until the current response has been written.

Lifecycle:
    server = ToolServer(name="search-server", dispatcher=..., transport_factory=...)
    server.install_signal_handlers()    # inside the running loop
    await server.serve()                # returns at EOF or on SIGINT/SIGTERM
"""

from __future__ import annotations

import asyncio
import logging
import signal
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Any

from toolgate import __version__
from toolgate.tools.dispatcher import InvocationRequest
from toolgate.tools.errors import InvalidParamsError, ToolError
from toolgate.transports.jsonrpc import (
    JsonRpcError,
    JsonRpcRequest,
    PARSE_ERROR,
    decode_request,
    encode_error,
    encode_result,
)

if TYPE_CHECKING:
    from toolgate.integrations.base import IntegrationClient
    from toolgate.tools.dispatcher import ToolDispatcher
    from toolgate.transports.protocol import Transport

logger = logging.getLogger(__name__)

DEFAULT_PROTOCOL_VERSION = "2024-11-05"
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603

TransportFactory = Callable[[], Awaitable["Transport"]]


class ToolServer:
    """
    One adapter process: {registry, dispatcher, transport}.

    Attributes:
        name: Server name reported by `initialize`
        version: Server version reported by `initialize`
        dispatcher: Validates and runs invocations
        clients: Integration clients closed on shutdown
    """

    def __init__(
        self,
        *,
        name: str,
        dispatcher: ToolDispatcher,
        transport_factory: TransportFactory,
        clients: Sequence[IntegrationClient] = (),
        version: str = __version__,
    ):
        self.name = name
        self.version = version
        self.dispatcher = dispatcher
        self.clients = tuple(clients)
        self._transport_factory = transport_factory
        self._transport: Transport | None = None
        self._serve_task: asyncio.Task[None] | None = None
        self._signals_installed: list[signal.Signals] = []

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def serve(self) -> None:
        """
        Serve frames until the channel closes or shutdown() is called.

        Always releases the transport and clients before returning.
        """
        self._serve_task = asyncio.current_task()
        self._transport = await self._transport_factory()
        logger.info(f"[{self.name}] running on {self._transport.channel_id}")

        try:
            await self._serve_loop(self._transport)
        except asyncio.CancelledError:
            logger.info(f"[{self.name}] shutdown requested, abandoning in-flight request")
        finally:
            await self.aclose()

    def shutdown(self) -> None:
        """Stop serving; safe to call from a signal handler."""
        if self._serve_task is not None and not self._serve_task.done():
            self._serve_task.cancel()

    def install_signal_handlers(
        self,
        signals: Sequence[signal.Signals] = (signal.SIGINT, signal.SIGTERM),
    ) -> None:
        """
        Register shutdown() as the handler for termination signals.

        Must be called from inside the running event loop, once.
        """
        if self._signals_installed:
            return

        loop = asyncio.get_running_loop()
        for sig in signals:
            try:
                loop.add_signal_handler(sig, self.shutdown)
            except (NotImplementedError, RuntimeError):
                # Event loops without signal support (e.g. Windows)
                logger.debug(f"[{self.name}] cannot handle {sig.name} in this event loop")
                continue
            self._signals_installed.append(sig)

    async def aclose(self) -> None:
        """Close the transport and every integration client."""
        loop = asyncio.get_running_loop()
        for sig in self._signals_installed:
            loop.remove_signal_handler(sig)
        self._signals_installed = []

        if self._transport is not None:
            await self._transport.close()

        for client in self.clients:
            await client.close()

        logger.info(f"[{self.name}] stopped")

    async def _serve_loop(self, transport: Transport) -> None:
        while True:
            try:
                line = await transport.read_message()
            except ValueError as e:
                # Oversized or non-UTF-8 line; the reader has discarded it
                logger.warning(f"[{self.name}] unreadable frame: {e}")
                await transport.write_message(encode_error(None, PARSE_ERROR, f"Parse error: {e}"))
                continue

            if line is None:
                logger.info(f"[{self.name}] channel closed")
                return

            response = await self.handle_message(line)
            if response is not None:
                await transport.write_message(response)

    # =========================================================================
    # Message handling
    # =========================================================================

    async def handle_message(self, line: str) -> str | None:
        """
        Handle one encoded frame.

        Returns:
            The encoded response, or None for blank lines and notifications
        """
        if not line.strip():
            return None

        try:
            request = decode_request(line)
        except JsonRpcError as e:
            logger.warning(f"[{self.name}] rejected frame: {e.message}")
            return encode_error(e.request_id, e.code, e.message)

        try:
            result = await self._handle_request(request)
        except ToolError as e:
            if request.is_notification:
                return None
            return encode_error(request.id, e.kind.code, e.message)
        except JsonRpcError as e:
            if request.is_notification:
                return None
            return encode_error(request.id, e.code, e.message)
        except Exception as e:
            logger.error(f"[MCP Error] {request.method} failed: {e}", exc_info=True)
            if request.is_notification:
                return None
            return encode_error(request.id, INTERNAL_ERROR, f"Internal error: {e}")

        if request.is_notification:
            return None
        return encode_result(request.id, result)

    async def _handle_request(self, request: JsonRpcRequest) -> dict[str, Any]:
        method = request.method
        params = request.params or {}

        if method == "initialize":
            return self._initialize(params)
        if method == "notifications/initialized":
            logger.debug(f"[{self.name}] client initialized")
            return {}
        if method == "ping":
            return {}
        if method == "tools/list":
            return {"tools": self.dispatcher.registry.to_mcp_schemas()}
        if method == "tools/call":
            return await self._call_tool(params)

        raise JsonRpcError(METHOD_NOT_FOUND, f"Method not found: {method}", request.id)

    def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        protocol_version = params.get("protocolVersion")
        if not isinstance(protocol_version, str) or not protocol_version:
            protocol_version = DEFAULT_PROTOCOL_VERSION

        client_info = params.get("clientInfo")
        if not isinstance(client_info, dict):
            client_info = {}
        logger.info(
            f"[{self.name}] initialize from {client_info.get('name', 'unknown client')} "
            f"(protocol {protocol_version})"
        )

        return {
            "protocolVersion": protocol_version,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": self.name, "version": self.version},
        }

    async def _call_tool(self, params: dict[str, Any]) -> dict[str, Any]:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidParamsError("Tool name is required")

        result = await self.dispatcher.invoke(
            InvocationRequest(tool_name=name, arguments=params.get("arguments"))
        )
        return result.to_dict()

    def __repr__(self) -> str:
        return f"<ToolServer {self.name} tools={self.dispatcher.registry.list_names()}>"
