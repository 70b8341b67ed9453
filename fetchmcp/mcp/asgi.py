"""HTTP transport: a single ``POST /mcp`` endpoint carrying JSON-RPC envelopes."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool

from .errors import ParseError
from .server import MCPServer, decode_request, parse_error_response

logger = logging.getLogger(__name__)


def _json_response(payload: dict[str, Any], status_code: int = 200) -> Response:
    return Response(
        content=json.dumps(payload, ensure_ascii=False),
        media_type="application/json",
        status_code=status_code,
    )


def create_app(server: MCPServer) -> FastAPI:
    """Build the FastAPI application serving ``server``."""
    app = FastAPI(title=server.name, version=server.version)
    app.state.mcp_server = server

    @app.post("/mcp")
    async def mcp_post(request: Request) -> Response:
        body = await request.body()
        try:
            rpc = decode_request(body)
        except ParseError:
            logger.debug("Rejecting undecodable request body (%d bytes)", len(body))
            return _json_response(parse_error_response(), status_code=400)

        # Tool handlers block on network I/O; keep them off the event loop.
        response = await run_in_threadpool(server.handle_request, rpc)
        if response is None:
            return Response(status_code=204)
        return _json_response(response)

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {
            "ok": True,
            "name": server.name,
            "version": server.version,
            "tools": len(server.registry),
        }

    return app


__all__ = ["create_app"]
