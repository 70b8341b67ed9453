"""Trivial tools useful for checking that a client is wired up."""

from __future__ import annotations

from fetchmcp.mcp import ToolContext, ToolRegistry, ToolResult, build_tool, number_param, string_param


def register_basic_tools(registry: ToolRegistry) -> None:
    """Register the ``echo`` and ``add`` tools."""

    registry.register_tool(
        build_tool(
            name="echo",
            description="Echo the input text back to the caller.",
            parameters=[string_param("text", "Text to echo.", required=True)],
            handler=_echo_handler,
        )
    )

    registry.register_tool(
        build_tool(
            name="add",
            description="Add two numbers.",
            parameters=[
                number_param("a", "First number.", required=True),
                number_param("b", "Second number.", required=True),
            ],
            handler=_add_handler,
        )
    )


def _echo_handler(ctx: ToolContext) -> ToolResult:
    return ctx.text("Echo: " + ctx.string("text"))


def _add_handler(ctx: ToolContext) -> ToolResult:
    a, b = ctx.number("a"), ctx.number("b")
    return ctx.text(f"{a:.2f} + {b:.2f} = {a + b:.2f}")
