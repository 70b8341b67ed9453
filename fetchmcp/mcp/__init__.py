"""Tool invocation core: registry, invocation context and JSON-RPC dispatcher."""

from __future__ import annotations

from .context import ToolContext
from .errors import (
    InternalError,
    InvalidParams,
    JSONRPCError,
    MethodNotFound,
    ParseError,
)
from .registry import ToolRegistry
from .server import MCPServer, decode_request
from .tool import (
    TextContent,
    ToolDefinition,
    ToolParameter,
    ToolResult,
    bool_param,
    build_tool,
    number_param,
    string_param,
)


__all__ = [
    "InternalError",
    "InvalidParams",
    "JSONRPCError",
    "MCPServer",
    "MethodNotFound",
    "ParseError",
    "TextContent",
    "ToolContext",
    "ToolDefinition",
    "ToolParameter",
    "ToolRegistry",
    "ToolResult",
    "bool_param",
    "build_tool",
    "decode_request",
    "number_param",
    "string_param",
]
