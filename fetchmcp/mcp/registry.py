"""Name-keyed registry of tool definitions."""

from __future__ import annotations

from typing import Any, Iterator

from .tool import ToolDefinition


class ToolRegistry:
    """Mapping of tool name to :class:`ToolDefinition`.

    Registration happens once at startup from a single thread; afterwards the
    registry is only read, so concurrent lookups need no locking. Registering
    a name twice replaces the earlier definition.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        if not isinstance(tool, ToolDefinition):
            raise TypeError("register_tool expects a ToolDefinition instance.")
        self._tools[tool.name] = tool

    def get_tool(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the ``tools/list`` schema of every registered tool."""
        return [tool.to_schema() for tool in self._tools.values()]

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(list(self._tools.values()))

    def __len__(self) -> int:
        return len(self._tools)


__all__ = ["ToolRegistry"]
