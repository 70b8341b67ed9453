"""Tool descriptors and results exchanged with MCP clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterable

if TYPE_CHECKING:
    from .context import ToolContext

PARAMETER_KINDS = ("string", "number", "boolean")


@dataclass(slots=True)
class TextContent:
    """A single text payload inside a tool result."""

    text: str
    type: str = "text"

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(slots=True)
class ToolResult:
    """Outcome of a tool handler.

    A failed operation is still a successful RPC call; clients are expected
    to branch on ``is_error`` rather than on the envelope.
    """

    content: list[TextContent] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        """Concatenated text of every content item."""
        return "".join(item.text for item in self.content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [item.to_dict() for item in self.content],
            "isError": self.is_error,
        }


ToolHandler = Callable[["ToolContext"], ToolResult]


@dataclass(frozen=True, slots=True)
class ToolParameter:
    """A named argument advertised in a tool's input schema."""

    name: str
    kind: str = "string"
    description: str = ""
    required: bool = False

    def __post_init__(self) -> None:
        if self.kind not in PARAMETER_KINDS:
            raise ValueError(
                f"Invalid parameter kind: {self.kind}. Must be one of {PARAMETER_KINDS}"
            )


def string_param(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name=name, kind="string", description=description, required=required)


def number_param(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name=name, kind="number", description=description, required=required)


def bool_param(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name=name, kind="boolean", description=description, required=required)


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Immutable description of a tool and the handler that runs it.

    Parameters keep their declaration order; a later parameter with the same
    name replaces the earlier one in the schema, matching how a property map
    is overwritten.
    """

    name: str
    description: str = ""
    parameters: tuple[ToolParameter, ...] = ()
    handler: ToolHandler | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Tool name must be a non-empty string.")
        # Accept any iterable of parameters but store a tuple.
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def to_schema(self) -> dict[str, Any]:
        """Render the ``tools/list`` entry for this tool."""
        properties: dict[str, dict[str, str]] = {}
        required: list[str] = []
        for param in self.parameters:
            properties[param.name] = {"type": param.kind, "description": param.description}
            if param.required and param.name not in required:
                required.append(param.name)
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": {
                "type": "object",
                "properties": properties,
                "required": required,
            },
        }


def build_tool(
    name: str,
    description: str = "",
    parameters: Iterable[ToolParameter] = (),
    handler: ToolHandler | None = None,
) -> ToolDefinition:
    """Assemble a :class:`ToolDefinition` from its parts."""
    return ToolDefinition(
        name=name,
        description=description,
        parameters=tuple(parameters),
        handler=handler,
    )


__all__ = [
    "PARAMETER_KINDS",
    "TextContent",
    "ToolDefinition",
    "ToolHandler",
    "ToolParameter",
    "ToolResult",
    "bool_param",
    "build_tool",
    "number_param",
    "string_param",
]
