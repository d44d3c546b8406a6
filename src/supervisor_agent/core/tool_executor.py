"""Tool execution logic for the agent loops.

This module dispatches the tool calls of one model turn against a registry
and records one tool message per executed call.
"""

from enum import Enum
from typing import TYPE_CHECKING

from ..exceptions import ToolError, ToolExecutionError, ToolNotFoundError
from ..logging import get_logger
from ..tools.registry import ToolRegistry
from ..types import ToolCall

if TYPE_CHECKING:
    from .memory_manager import MemoryManager

logger = get_logger(__name__)


class UnknownToolPolicy(Enum):
    """What to do with a tool call whose name is not in the registry."""
    # drop the call: no message, no error
    SKIP = "skip"
    # record a "not found" tool message so the model can adapt
    REPORT = "report"


class ToolExecutor:
    """Executes tool calls sequentially, in the order the model requested them.

    Tool-level failures (undecodable arguments, exceptions raised by a tool)
    are turned into result text instead of aborting the loop.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        unknown_tool_policy: UnknownToolPolicy = UnknownToolPolicy.SKIP,
    ):
        """Initialize the tool executor.

        Args:
            registry: Tools available to the loop.
            unknown_tool_policy: Handling of unresolvable tool names.
        """
        self.registry = registry
        self.unknown_tool_policy = unknown_tool_policy

    def execute_tool_call(self, tool_call: ToolCall) -> str | None:
        """Execute a single tool call.

        Returns:
            The result text, or None if the call was skipped.
        """
        tool = self.registry.find(tool_call.name)
        if tool is None:
            if self.unknown_tool_policy == UnknownToolPolicy.REPORT:
                logger.warning(f"tool '{tool_call.name}' not found, reporting to model")
                return str(ToolNotFoundError(tool_call.name))
            logger.warning(f"tool '{tool_call.name}' not found, skipping call {tool_call.id}")
            return None

        logger.info(f"executing tool: {tool_call.name} with args: {tool_call.arguments}")
        try:
            result = self.registry.execute(tool, tool_call.arguments)
        except ToolExecutionError as e:
            logger.error(f"tool '{tool_call.name}' failed: {e}")
            return f"Tool execution failed: {e.cause}"
        except ToolError as e:
            logger.error(f"tool '{tool_call.name}' failed: {e}")
            return f"Tool execution failed: {e}"

        logger.debug(f"tool '{tool_call.name}' result: {result}")
        return result

    def execute_tool_calls(
        self,
        tool_calls: list[ToolCall],
        memory: "MemoryManager",
    ) -> int:
        """Execute tool calls and add their results to memory.

        Args:
            tool_calls: Tool calls from one model turn, in model order.
            memory: The memory manager to store results.

        Returns:
            The number of tool messages recorded.
        """
        recorded = 0
        for tool_call in tool_calls:
            result = self.execute_tool_call(tool_call)
            if result is None:
                continue
            memory.add_tool_result(tool_call.id, tool_call.name, result)
            recorded += 1
        return recorded
