"""Per-call invocation context handed to tool handlers."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from .tool import TextContent, ToolResult

logger = logging.getLogger(__name__)


class ToolContext:
    """View over the raw arguments of a single ``tools/call`` request.

    Accessors never fail: an absent key or a value of the wrong JSON type
    yields the zero value for the requested type. Whether an argument is
    required is advertised in the schema only; handlers decide what to do
    with an empty value.
    """

    def __init__(self, name: str, arguments: Mapping[str, Any] | None = None) -> None:
        self.name = name
        self.arguments: dict[str, Any] = dict(arguments or {})

    def __repr__(self) -> str:
        return f"ToolContext(name={self.name!r}, arguments={self.arguments!r})"

    # Argument accessors

    def has(self, key: str) -> bool:
        return key in self.arguments

    def string(self, key: str) -> str:
        value = self.arguments.get(key)
        if isinstance(value, str):
            return value
        return ""

    def number(self, key: str) -> float:
        value = self.arguments.get(key)
        # bool is an int subclass but is not a JSON number.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return 0

    def integer(self, key: str) -> int:
        return int(self.number(key))

    def boolean(self, key: str) -> bool:
        value = self.arguments.get(key)
        if isinstance(value, bool):
            return value
        return False

    # Result constructors

    def text(self, text: str) -> ToolResult:
        return ToolResult(content=[TextContent(text=text)])

    def json(self, data: Any) -> ToolResult:
        """Serialize ``data`` and return it as a text result."""
        try:
            payload = json.dumps(data, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            logger.warning("Tool %s produced unserializable output: %s", self.name, exc)
            return self.error(f"JSON marshal error: {exc}")
        return ToolResult(content=[TextContent(text=payload)])

    def markdown(self, markdown: str) -> ToolResult:
        return self.text(markdown)

    def error(self, message: str) -> ToolResult:
        return ToolResult(content=[TextContent(text=message)], is_error=True)


__all__ = ["ToolContext"]
