"""Tools for multi-agent coordination.

This module wraps worker agents as tools so the supervisor's model can
delegate to them through ordinary function calling.
"""

from typing import TYPE_CHECKING, Any

from ..logging import get_logger
from ..tools.base import FunctionTool

if TYPE_CHECKING:
    from ..agent import Agent

logger = get_logger(__name__)


def delegation_parameters() -> dict[str, Any]:
    """JSON schema of a worker-as-tool: a single required task string."""
    return {
        "type": "object",
        "properties": {
            "task": {
                "type": "string",
                "description": "The task description to delegate to this assistant.",
            },
        },
        "required": ["task"],
    }


def create_delegation_tool(agent: "Agent") -> FunctionTool:
    """Expose a worker agent as a callable tool named after the agent.

    The tool forwards its ``task`` argument to ``agent.run``. A failing worker
    does not abort the supervisor: the failure is returned as result text.

    Args:
        agent: The worker to delegate to.

    Returns:
        A FunctionTool whose execution runs the worker.
    """

    def delegate(task: str) -> str:
        logger.info(f"delegating to '{agent.name}': {task}")
        try:
            return agent.run(task)
        except Exception as e:
            logger.error(f"worker '{agent.name}' failed: {e}")
            return f"Execution failed: {e}"

    return FunctionTool(
        name=agent.name,
        description=f"Delegate a task to {agent.name}: {agent.description}",
        parameters=delegation_parameters(),
        func=delegate,
    )
