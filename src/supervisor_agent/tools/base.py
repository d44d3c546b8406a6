from abc import ABC, abstractmethod
from typing import Any, Callable

from ..types import ToolSpec


class BaseTool(ABC):
    """Abstract base class for all tools.

    A tool is a schema-described capability plus an executable binding that
    takes keyword arguments and returns result text. Two kinds exist: local
    tools (``FunctionTool`` and the concrete subclasses in this package) and
    remote-proxy tools (``supervisor_agent.remote.RemoteTool``).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the tool name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Return the tool description."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """Return the JSON schema for tool parameters."""
        pass

    @abstractmethod
    def execute(self, **kwargs) -> str:
        """Execute the tool with the given arguments."""
        pass

    @property
    def spec(self) -> ToolSpec:
        return ToolSpec(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
        )

    def to_schema(self) -> dict[str, Any]:
        """Return the tool schema for model function calling."""
        return self.spec.to_schema()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class FunctionTool(BaseTool):
    """A local tool backed by a plain Python callable.

    Example:
        def greet(name: str) -> str:
            return f"hello {name}"

        tool = FunctionTool(
            name="greet",
            description="Greet someone by name",
            parameters={
                "type": "object",
                "properties": {"name": {"type": "string"}},
                "required": ["name"],
            },
            func=greet,
        )
    """

    def __init__(
        self,
        name: str,
        description: str,
        parameters: dict[str, Any],
        func: Callable[..., Any],
    ):
        self._spec = ToolSpec(name=name, description=description, parameters=parameters)
        self._func = func

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def description(self) -> str:
        return self._spec.description

    @property
    def parameters(self) -> dict[str, Any]:
        return self._spec.parameters

    @property
    def spec(self) -> ToolSpec:
        return self._spec

    def execute(self, **kwargs) -> str:
        return str(self._func(**kwargs))
