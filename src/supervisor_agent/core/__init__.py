"""Core loop components.

- ToolLoop: the reasoning/acting loop used by agents and the supervisor
- ToolExecutor: dispatches the tool calls of one model turn
- MemoryManager: per-invocation conversation history
"""

from .memory_manager import MemoryManager
from .tool_executor import ToolExecutor, UnknownToolPolicy
from .tool_loop import ToolLoop

__all__ = ["MemoryManager", "ToolExecutor", "ToolLoop", "UnknownToolPolicy"]
