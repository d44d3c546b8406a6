"""Conversation history for one loop invocation."""

from ..types import Message, MessageRole, ToolCall


class MemoryManager:
    """Append-only message history.

    A fresh instance is created for every loop invocation, so history is never
    shared between runs or persisted after one.
    """

    def __init__(self):
        self.history: list[Message] = []

    def add_message(self, message: Message) -> None:
        """Add a message to conversation history."""
        self.history.append(message)

    def add_system_message(self, content: str) -> None:
        self.history.append(Message(role=MessageRole.SYSTEM, content=content))

    def add_user_message(self, content: str) -> None:
        self.history.append(Message(role=MessageRole.USER, content=content))

    def add_assistant_message(
        self,
        content: str | None,
        tool_calls: list[ToolCall] | None = None,
    ) -> None:
        self.history.append(Message(
            role=MessageRole.ASSISTANT,
            content=content or "",
            tool_calls=tool_calls,
        ))

    def add_tool_result(self, tool_call_id: str, name: str, content: str) -> None:
        """Add a tool result message to conversation history.

        Args:
            tool_call_id: The ID of the tool call.
            name: The name of the tool.
            content: The result content.
        """
        self.history.append(Message(
            role=MessageRole.TOOL,
            content=content,
            tool_call_id=tool_call_id,
            name=name,
        ))

    def snapshot(self) -> list[Message]:
        """Return a copy of the history as it stands now."""
        return list(self.history)

    def get_history(self) -> list[dict]:
        """Export history as list of dicts."""
        return [msg.to_dict() for msg in self.history]

    def __len__(self) -> int:
        return len(self.history)
