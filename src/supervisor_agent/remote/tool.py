"""Tool proxy whose execution happens on a remote provider."""

from typing import TYPE_CHECKING, Any

from ..exceptions import RemoteToolError
from ..logging import get_logger
from ..tools.base import BaseTool

if TYPE_CHECKING:
    from .client import RemoteToolClient

logger = get_logger(__name__)


class RemoteTool(BaseTool):
    """A discovered remote tool.

    Execution is forwarded to the provider that announced the tool. Protocol
    failures become result text so the calling loop always gets a tool
    message back.
    """

    def __init__(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any] | None,
        client: "RemoteToolClient",
    ):
        self._name = name
        self._description = description
        self._parameters = input_schema or {"type": "object", "properties": {}}
        self.client = client

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def parameters(self) -> dict[str, Any]:
        return self._parameters

    @property
    def server(self) -> str:
        return self.client.name

    def execute(self, **kwargs) -> str:
        try:
            return self.client.execute_tool(self._name, kwargs)
        except RemoteToolError as e:
            logger.error(f"remote tool '{self._name}' on '{self.server}' failed: {e}")
            return f"Tool execution failed: {e}"

    def __repr__(self) -> str:
        return f"RemoteTool(name='{self._name}', server='{self.server}')"
