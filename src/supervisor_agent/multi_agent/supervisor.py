"""Supervisor agent for multi-agent orchestration.

The supervisor coordinates worker agents by exposing each of them to its
model as a single tool, then running the same tool-use loop the workers run.
"""

from typing import Iterable

from ..agent import Agent
from ..clients.base import BaseLLMClient
from ..core import ToolLoop, UnknownToolPolicy
from ..tools.registry import ToolRegistry
from .prompts import format_supervisor_prompt
from .tools import create_delegation_tool


class Supervisor:
    """Routes a user request to worker agents until the model stops delegating.

    The supervisor:
    1. Sends the request to its model with one tool per worker
    2. Runs each requested worker with the given task, in order
    3. Feeds every worker's answer back as a tool result
    4. Returns the model's answer once it requests no more delegations

    Workers are shared references; the supervisor never mutates them.
    """

    def __init__(
        self,
        agents: Iterable[Agent],
        client: BaseLLMClient,
        system_prompt: str | None = None,
        max_iterations: int | None = 20,
        unknown_tool_policy: UnknownToolPolicy = UnknownToolPolicy.SKIP,
    ):
        """Initialize the supervisor.

        Args:
            agents: The worker roster. Names must be unique.
            client: Model client for the supervisor itself.
            system_prompt: System prompt; generated from the roster if omitted.
            max_iterations: Cap on supervisor model calls per request.
            unknown_tool_policy: Handling of delegations to unknown workers.

        Raises:
            ValueError: If two agents share a name.
        """
        self.agents: list[Agent] = []
        for agent in agents:
            if self.find_agent(agent.name) is not None:
                raise ValueError(f"Agent '{agent.name}' is already in the roster")
            self.agents.append(agent)

        self.client = client
        self.system_prompt = system_prompt or format_supervisor_prompt(
            "\n".join(f"- {agent.name}: {agent.description}" for agent in self.agents)
        )

        self._loop = ToolLoop(
            name="supervisor",
            client=client,
            registry=self.build_registry(),
            system_prompt=self.system_prompt,
            max_iterations=max_iterations,
            unknown_tool_policy=unknown_tool_policy,
        )

    def build_registry(self) -> ToolRegistry:
        """Synthesize one delegation tool per worker, in roster order."""
        return ToolRegistry(create_delegation_tool(agent) for agent in self.agents)

    @property
    def registry(self) -> ToolRegistry:
        return self._loop.registry

    def find_agent(self, name: str) -> Agent | None:
        """Get a worker by name."""
        for agent in self.agents:
            if agent.name == name:
                return agent
        return None

    def invoke(self, user_message: str) -> str:
        """Run the supervisor on a user request.

        Args:
            user_message: The user's request.

        Returns:
            The supervisor model's final answer.

        Raises:
            ClientError: If the supervisor's model gateway fails.
            MaxIterationsExceededError: If the supervisor hits its cap.
        """
        return self._loop.run(user_message)

    run = invoke

    def visualize(self) -> str:
        """Generate a Mermaid diagram of the supervisor and its workers."""
        from ..visualizer import SupervisorVisualizer
        return SupervisorVisualizer(self).generate_mermaid_graph()

    def __repr__(self) -> str:
        return f"Supervisor(agents={[agent.name for agent in self.agents]})"


def create_supervisor(
    agents: Iterable[Agent],
    client: BaseLLMClient,
    prompt: str | None = None,
    max_iterations: int | None = 20,
) -> Supervisor:
    """Factory function to create a supervisor over a worker roster.

    Args:
        agents: The worker agents.
        client: Model client for the supervisor.
        prompt: Supervisor system prompt (generated if omitted).
        max_iterations: Cap on supervisor model calls per request.

    Returns:
        Configured Supervisor.
    """
    return Supervisor(
        agents=agents,
        client=client,
        system_prompt=prompt,
        max_iterations=max_iterations,
    )
