"""The reasoning/acting loop shared by worker agents and the supervisor."""

from ..clients.base import BaseLLMClient
from ..exceptions import MaxIterationsExceededError
from ..logging import get_logger
from ..tools.registry import ToolRegistry
from .memory_manager import MemoryManager
from .tool_executor import ToolExecutor, UnknownToolPolicy

logger = get_logger(__name__)


class ToolLoop:
    """Alternate model calls and tool execution until the model answers.

    Each ``run`` starts from a fresh history seeded with the system prompt
    and the task:

    1. Send the history and tool schemas to the model
    2. If the response has no tool calls, return its content
    3. Otherwise record the assistant turn, execute each requested tool in
       order and record one tool message per executed call
    4. Repeat

    Gateway errors propagate to the caller. ``max_iterations`` bounds the
    number of model calls; None leaves the loop unbounded.
    """

    def __init__(
        self,
        name: str,
        client: BaseLLMClient,
        registry: ToolRegistry,
        system_prompt: str,
        max_iterations: int | None = 20,
        unknown_tool_policy: UnknownToolPolicy = UnknownToolPolicy.SKIP,
    ):
        if max_iterations is not None and max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        self.name = name
        self.client = client
        self.registry = registry
        self.system_prompt = system_prompt
        self.max_iterations = max_iterations
        self.tool_executor = ToolExecutor(registry, unknown_tool_policy)

    def run(self, task: str) -> str:
        """Run the loop on a task and return the model's final answer.

        Raises:
            ClientError: If the model gateway fails.
            MaxIterationsExceededError: If the iteration cap is reached.
        """
        memory = MemoryManager()
        memory.add_system_message(self.system_prompt)
        memory.add_user_message(task)

        tools = self.registry.to_schema_list() or None
        iteration = 0

        while True:
            if self.max_iterations is not None and iteration >= self.max_iterations:
                logger.error(f"[{self.name}] reached {self.max_iterations} iterations")
                raise MaxIterationsExceededError(self.name, self.max_iterations)
            iteration += 1

            logger.debug(f"[{self.name}] iteration {iteration}, {len(memory)} messages")
            response = self.client.generate(messages=memory.snapshot(), tools=tools)

            if not response.tool_calls:
                logger.info(f"[{self.name}] finished after {iteration} iteration(s)")
                return response.content

            memory.add_assistant_message(response.message.content, response.tool_calls)
            self.tool_executor.execute_tool_calls(response.tool_calls, memory)
