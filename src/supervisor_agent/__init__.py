"""Supervisor Agent - delegate user requests to tool-using worker agents.

This package provides a supervisor that routes subtasks to specialized
worker agents, each running a ReAct tool loop over local tools or tools
discovered on remote providers.
"""

from .agent import Agent
from .core import ToolLoop, UnknownToolPolicy
from .exceptions import (
    AgentError,
    ClientError,
    MaxIterationsExceededError,
    RemoteToolError,
    ToolError,
)
from .multi_agent import Supervisor, create_supervisor
from .tools import BaseTool, FunctionTool, ToolRegistry
from .types import (
    FinishReason,
    Message,
    MessageRole,
    ModelResponse,
    ToolCall,
    ToolSpec,
)

__all__ = [
    # agents
    "Agent",
    "Supervisor",
    "create_supervisor",
    "ToolLoop",
    "UnknownToolPolicy",
    # tools
    "BaseTool",
    "FunctionTool",
    "ToolRegistry",
    # types
    "FinishReason",
    "Message",
    "MessageRole",
    "ModelResponse",
    "ToolCall",
    "ToolSpec",
    # exceptions
    "AgentError",
    "ClientError",
    "MaxIterationsExceededError",
    "RemoteToolError",
    "ToolError",
]
