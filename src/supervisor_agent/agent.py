"""Worker agent implementation.

An Agent is a specialized worker: a system prompt, a shared model client and
its own tool registry. It is stateless across runs; every ``run`` starts a
new conversation.
"""

from typing import Iterable

from .clients.base import BaseLLMClient
from .core import ToolLoop, UnknownToolPolicy
from .tools.base import BaseTool
from .tools.registry import ToolRegistry


class Agent:
    """Agent that coordinates between the model and its tools.

    The agent runs the tool-use loop:
    1. Send messages to the model
    2. If the model requests tool calls, execute them
    3. Add tool results to history
    4. Repeat until the model produces a final response
    """

    def __init__(
        self,
        name: str,
        client: BaseLLMClient,
        tools: Iterable[BaseTool] | ToolRegistry = (),
        system_prompt: str = "You are a helpful assistant.",
        description: str = "",
        max_iterations: int | None = 20,
        unknown_tool_policy: UnknownToolPolicy = UnknownToolPolicy.SKIP,
    ):
        """Initialize the agent.

        Args:
            name: Unique identifier for this agent within a supervisor's roster.
            client: The model gateway client (may be shared between agents).
            tools: Tools owned by this agent, or a ready-made registry.
            system_prompt: System prompt defining the agent's role.
            description: Human-readable description shown to a supervisor.
                Falls back to the system prompt.
            max_iterations: Cap on model calls per run (None for unbounded).
            unknown_tool_policy: Handling of tool calls with unknown names.
        """
        self.name = name
        self.client = client
        self.system_prompt = system_prompt
        self.description = description or system_prompt
        self.registry = tools if isinstance(tools, ToolRegistry) else ToolRegistry(tools)

        self._loop = ToolLoop(
            name=name,
            client=client,
            registry=self.registry,
            system_prompt=system_prompt,
            max_iterations=max_iterations,
            unknown_tool_policy=unknown_tool_policy,
        )

    @property
    def tools(self) -> list[BaseTool]:
        """Get the list of tools available to this agent."""
        return list(self.registry)

    @property
    def max_iterations(self) -> int | None:
        return self._loop.max_iterations

    def run(self, task: str) -> str:
        """Execute a task and return the agent's final answer.

        Args:
            task: The task description to execute.

        Returns:
            The model's final text content.

        Raises:
            ClientError: If the model gateway fails.
            MaxIterationsExceededError: If the iteration cap is reached.
        """
        return self._loop.run(task)

    def __repr__(self) -> str:
        return f"Agent(name='{self.name}', tools={len(self.registry)})"
