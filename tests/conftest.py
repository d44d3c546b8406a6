"""Shared test fixtures and configuration."""

import json
from unittest.mock import MagicMock

import pytest

from supervisor_agent.clients.base import BaseLLMClient
from supervisor_agent.types import (
    FinishReason,
    Message,
    MessageRole,
    ModelResponse,
    ToolCall,
    UsageStats,
)


@pytest.fixture
def mock_client():
    """Create a mock model gateway client."""
    client = MagicMock(spec=BaseLLMClient)
    return client


@pytest.fixture
def make_tool_call():
    """Build a ToolCall; dict arguments are JSON-encoded like a real gateway does."""
    counter = {"n": 0}

    def _make(name: str, arguments: dict | str | None = None, call_id: str | None = None) -> ToolCall:
        counter["n"] += 1
        if arguments is None:
            arguments = {}
        if isinstance(arguments, dict):
            arguments = json.dumps(arguments)
        return ToolCall(id=call_id or f"call_{counter['n']}", name=name, arguments=arguments)

    return _make


@pytest.fixture
def make_response():
    """Build a ModelResponse with either text content or tool calls."""

    def _make(content: str | None = None, tool_calls: list[ToolCall] | None = None) -> ModelResponse:
        return ModelResponse(
            message=Message(
                role=MessageRole.ASSISTANT,
                content=content,
                tool_calls=tool_calls or None,
            ),
            finish_reason=FinishReason.TOOL_USE if tool_calls else FinishReason.STOP,
        )

    return _make


@pytest.fixture
def sample_messages():
    """Create sample conversation messages."""
    return [
        Message(role=MessageRole.SYSTEM, content="You are a helpful assistant."),
        Message(role=MessageRole.USER, content="Hello!"),
        Message(role=MessageRole.ASSISTANT, content="Hi there!"),
    ]


@pytest.fixture
def sample_response():
    """Create a sample model response."""
    return ModelResponse(
        message=Message(role=MessageRole.ASSISTANT, content="The result is 3."),
        finish_reason=FinishReason.STOP,
        usage=UsageStats(prompt_tokens=10, completion_tokens=5, total_tokens=15),
    )
