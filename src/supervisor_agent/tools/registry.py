"""Tool registry.

Holds the named tools owned by one agent (or the workers-as-tools a
supervisor synthesizes), resolves names to tools, serializes the model-facing
schema list and decodes raw argument text before execution.
"""

import json
from typing import Any, Iterable, Iterator

from ..exceptions import InvalidArgumentError, ToolExecutionError
from ..logging import get_logger
from .base import BaseTool

logger = get_logger(__name__)


class ToolRegistry:
    """Ordered, name-unique collection of tools."""

    def __init__(self, tools: Iterable[BaseTool] | None = None):
        """Initialize the registry.

        Args:
            tools: Optional tools to register, in order.

        Raises:
            ValueError: If two tools share a name.
        """
        self._tools: dict[str, BaseTool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: BaseTool) -> None:
        """Register a tool under its name.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def find(self, name: str) -> BaseTool | None:
        """Get a tool by name, or None if it is not registered."""
        return self._tools.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def to_schema_list(self) -> list[dict[str, Any]]:
        """Return the model-facing schema of every tool, in registration order."""
        return [tool.to_schema() for tool in self._tools.values()]

    def execute(self, tool: BaseTool, arguments: str) -> str:
        """Decode the raw argument text and execute the tool.

        Args:
            tool: The tool to execute.
            arguments: JSON text encoding the parameter mapping.

        Returns:
            The tool's result text.

        Raises:
            InvalidArgumentError: If the arguments are not a JSON object.
                The tool is not invoked.
            ToolExecutionError: If the tool raised while executing.
        """
        kwargs = decode_arguments(tool.name, arguments)
        logger.debug(f"executing tool '{tool.name}' with args: {kwargs}")
        try:
            return tool.execute(**kwargs)
        except Exception as e:
            raise ToolExecutionError(tool.name, e) from e

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[BaseTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolRegistry(tools={self.names})"


def decode_arguments(tool_name: str, arguments: str | None) -> dict[str, Any]:
    """Decode tool-call argument text into a parameter mapping.

    Empty text means "no arguments".

    Raises:
        InvalidArgumentError: If the text is not JSON or not a JSON object.
    """
    if arguments is None or not arguments.strip():
        return {}
    try:
        decoded = json.loads(arguments)
    except json.JSONDecodeError as e:
        logger.error(f"could not decode arguments for '{tool_name}': {arguments!r}")
        raise InvalidArgumentError(tool_name, str(e)) from e
    if not isinstance(decoded, dict):
        raise InvalidArgumentError(
            tool_name, f"expected a JSON object, got {type(decoded).__name__}"
        )
    return decoded
