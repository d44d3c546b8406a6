"""Factory for workers backed by tools discovered on remote providers."""

from typing import Iterable

from ...agent import Agent
from ...clients.base import BaseLLMClient
from ...remote import MultiServerRemoteClient, RemoteTool


def create_remote_assistant(
    name: str,
    client: BaseLLMClient,
    tools: Iterable[RemoteTool],
    system_prompt: str | None = None,
    max_iterations: int | None = 20,
) -> Agent:
    """Create a worker whose tools execute on a remote provider.

    Args:
        name: Worker name (unique within the supervisor's roster).
        client: Model client for the worker.
        tools: Discovered remote tools.
        system_prompt: Optional system prompt; a generic one is used otherwise.
        max_iterations: Cap on model calls per delegated task.
    """
    tools = list(tools)
    if system_prompt is None:
        tool_names = ", ".join(tool.name for tool in tools) or "no tools"
        system_prompt = (
            f"You are {name}. Answer the task using your tools ({tool_names}). "
            "Only handle requests your tools can serve."
        )
    return Agent(
        name=name,
        client=client,
        tools=tools,
        system_prompt=system_prompt,
        max_iterations=max_iterations,
    )


def create_remote_assistants(
    remote_client: MultiServerRemoteClient,
    client: BaseLLMClient,
    prompts: dict[str, str] | None = None,
    max_iterations: int | None = 20,
) -> list[Agent]:
    """Create one worker per remote provider, named ``<provider>_assistant``.

    Providers that announced no tools (or failed discovery) get no worker.
    """
    prompts = prompts or {}
    agents = []
    for server, tools in remote_client.get_tools_by_server().items():
        if not tools:
            continue
        agents.append(create_remote_assistant(
            name=f"{server}_assistant",
            client=client,
            tools=tools,
            system_prompt=prompts.get(server),
            max_iterations=max_iterations,
        ))
    return agents
