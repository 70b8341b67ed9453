"""CLI commands that run the MCP server transports."""

from __future__ import annotations

import argparse
import logging

from fetchmcp.cli import configure_logging
from fetchmcp.config import get_config
from fetchmcp.mcp.stdio import run_stdio
from fetchmcp.toolkit import build_server

logger = logging.getLogger(__name__)


def register_commands(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Add the ``serve`` and ``stdio`` commands to the main CLI parser."""
    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve JSON-RPC requests over HTTP (POST /mcp).",
    )
    serve_parser.add_argument(
        "--host",
        help="Interface to bind. Defaults to the HOST environment variable or 0.0.0.0.",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on. Defaults to the PORT environment variable or 8080.",
    )
    serve_parser.set_defaults(func=serve_cli)

    stdio_parser = subparsers.add_parser(
        "stdio",
        help="Serve newline-delimited JSON-RPC requests over stdin/stdout.",
    )
    stdio_parser.set_defaults(func=stdio_cli)


def serve_cli(args: argparse.Namespace) -> int:
    import uvicorn

    from fetchmcp.mcp.asgi import create_app

    config = get_config()
    configure_logging(config.log_level)
    server = build_server(config)
    host = args.host or config.host
    port = args.port or config.port

    logger.info("Starting %s %s on http://%s:%d/mcp", server.name, server.version, host, port)
    logger.info("Registered tools: %s", ", ".join(server.registry.names()))
    uvicorn.run(create_app(server), host=host, port=port, log_level=config.log_level.lower())
    return 0


def stdio_cli(args: argparse.Namespace) -> int:
    config = get_config()
    configure_logging(config.log_level)
    run_stdio(build_server(config))
    return 0
