"""CLI commands for inspecting and invoking tools without a transport."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from fetchmcp.cli import configure_logging
from fetchmcp.config import get_config
from fetchmcp.mcp import JSONRPCError
from fetchmcp.toolkit import build_server


def register_commands(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Add the ``tools`` and ``call`` commands to the main CLI parser."""
    tools_parser = subparsers.add_parser(
        "tools",
        help="Print the schema of every registered tool as JSON.",
    )
    tools_parser.set_defaults(func=list_tools_cli)

    call_parser = subparsers.add_parser(
        "call",
        help="Invoke a tool locally and print its result.",
    )
    call_parser.add_argument("name", help="Name of the tool to call.")
    call_parser.add_argument(
        "--arg",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="String argument for the tool. May be repeated.",
    )
    call_parser.add_argument(
        "--json",
        dest="json_arguments",
        help="Tool arguments as a JSON object; merged before --arg values.",
    )
    call_parser.set_defaults(func=call_tool_cli)


def _parse_arguments(args: argparse.Namespace) -> dict[str, Any]:
    arguments: dict[str, Any] = {}
    if args.json_arguments:
        decoded = json.loads(args.json_arguments)
        if not isinstance(decoded, dict):
            raise ValueError("--json must be a JSON object.")
        arguments.update(decoded)
    for item in args.arg:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid --arg value: {item!r}. Expected KEY=VALUE.")
        arguments[key] = value
    return arguments


def list_tools_cli(args: argparse.Namespace) -> int:
    server = build_server(get_config())
    print(json.dumps(server.registry.list_tools(), indent=2, ensure_ascii=False))
    return 0


def call_tool_cli(args: argparse.Namespace) -> int:
    config = get_config()
    configure_logging(config.log_level)
    try:
        arguments = _parse_arguments(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    server = build_server(config)
    try:
        result = server.call_tool(args.name, arguments)
    except JSONRPCError as exc:
        print(f"Error ({exc.code}): {exc.message}", file=sys.stderr)
        return 1

    print(result.text)
    return 1 if result.is_error else 0
