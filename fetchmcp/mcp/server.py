"""JSON-RPC 2.0 dispatcher for the MCP tools protocol.

The server is transport agnostic: :func:`decode_request` turns raw bytes into
an envelope and :meth:`MCPServer.handle_request` maps the envelope to a
response dict, or ``None`` for methods that expect no reply.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from .context import ToolContext
from .errors import InternalError, InvalidParams, JSONRPCError, MethodNotFound, ParseError
from .registry import ToolRegistry
from .tool import ToolResult

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"


def decode_request(raw: str | bytes) -> dict[str, Any]:
    """Decode a request body into an envelope.

    Raises:
        ParseError: If the body is not JSON, is not an object, or carries a
            non-string ``method``.
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError() from exc
    if not isinstance(payload, dict):
        raise ParseError()
    if not isinstance(payload.get("method", ""), str):
        raise ParseError()
    return payload


def error_response(request_id: Any, error: JSONRPCError) -> dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": error.to_dict(),
    }


def parse_error_response() -> dict[str, Any]:
    return error_response(None, ParseError())


def _decode_call_params(params: Any) -> tuple[str, dict[str, Any]]:
    if not isinstance(params, Mapping):
        raise InvalidParams("Invalid params")
    name = params.get("name", "")
    arguments = params.get("arguments")
    if arguments is None:
        arguments = {}
    if not isinstance(name, str) or not isinstance(arguments, Mapping):
        raise InvalidParams("Invalid params")
    return name, dict(arguments)


class MCPServer:
    """Routes decoded envelopes to the tool registry."""

    def __init__(self, registry: ToolRegistry, *, name: str, version: str = "1.0.0") -> None:
        self.registry = registry
        self.name = name
        self.version = version

    def initialize_result(self) -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {
                "tools": {"listChanged": False},
            },
            "serverInfo": {
                "name": self.name,
                "version": self.version,
            },
        }

    def handle_request(self, request: Mapping[str, Any]) -> dict[str, Any] | None:
        """Handle an MCP JSON-RPC request."""
        method = request.get("method", "")
        request_id = request.get("id")
        logger.debug("Handling %s (id=%r)", method, request_id)

        try:
            if method == "initialize":
                result: Any = self.initialize_result()

            elif method == "notifications/initialized":
                # Notification, no response needed
                return None

            elif method == "tools/list":
                result = {"tools": self.registry.list_tools()}

            elif method == "tools/call":
                name, arguments = _decode_call_params(request.get("params"))
                result = self.call_tool(name, arguments).to_dict()

            else:
                raise MethodNotFound(f"Method not found: {method}")

        except JSONRPCError as exc:
            logger.debug("Request %r failed with %s: %s", request_id, exc.code, exc.message)
            return error_response(request_id, exc)

        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": request_id,
            "result": result,
        }

    def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """Invoke a registered tool with a fresh :class:`ToolContext`.

        Raises:
            InvalidParams: If no tool is registered under ``name``.
            InternalError: If the tool has no handler or the handler crashed.
        """
        tool = self.registry.get_tool(name)
        if tool is None:
            raise InvalidParams(f"Unknown tool: {name}")
        if tool.handler is None:
            raise InternalError(f"Tool has no handler: {name}")

        context = ToolContext(name, arguments)
        logger.info("Calling tool %s", name)
        try:
            return tool.handler(context)
        except Exception as exc:
            logger.exception("Tool %s raised an unexpected error", name)
            raise InternalError(f"Tool execution failed: {name}") from exc


__all__ = [
    "JSONRPC_VERSION",
    "MCPServer",
    "PROTOCOL_VERSION",
    "decode_request",
    "error_response",
    "parse_error_response",
]
