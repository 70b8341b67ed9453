"""JSON-RPC 2.0 error types raised by the dispatcher."""

from __future__ import annotations

from typing import Any

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JSONRPCError(Exception):
    """Protocol-level failure that maps onto a JSON-RPC ``error`` object."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class ParseError(JSONRPCError):
    """Raised when a request body cannot be decoded into an envelope."""

    code = PARSE_ERROR

    def __init__(self, message: str = "Parse error") -> None:
        super().__init__(message)


class MethodNotFound(JSONRPCError):
    code = METHOD_NOT_FOUND


class InvalidParams(JSONRPCError):
    code = INVALID_PARAMS


class InternalError(JSONRPCError):
    code = INTERNAL_ERROR


__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "InternalError",
    "InvalidParams",
    "JSONRPCError",
    "MethodNotFound",
    "ParseError",
]
