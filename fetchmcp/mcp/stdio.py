"""Newline-delimited JSON-RPC transport over stdin/stdout."""

from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

from .errors import ParseError
from .server import MCPServer, decode_request, parse_error_response

logger = logging.getLogger(__name__)


def _write(stream: TextIO, payload: dict) -> None:
    stream.write(json.dumps(payload, ensure_ascii=False) + "\n")
    stream.flush()


def run_stdio(
    server: MCPServer,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Serve requests read line by line until EOF or interrupt."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    logger.info("Serving %s %s over stdio", server.name, server.version)

    while True:
        try:
            line = stdin.readline()
            if not line:
                break
            if not line.strip():
                continue

            try:
                request = decode_request(line)
            except ParseError:
                _write(stdout, parse_error_response())
                continue

            response = server.handle_request(request)
            if response is not None:
                _write(stdout, response)

        except KeyboardInterrupt:
            break


__all__ = ["run_stdio"]
