"""OpenAI-compatible client implementation.

This client talks to any chat-completions endpoint that follows the OpenAI
wire format (OpenAI itself, DashScope compatible mode, ...) and normalizes
responses to the unified format.
"""

import os
from contextlib import contextmanager
from typing import Any

from openai import APIConnectionError, APIStatusError, OpenAI
from openai import AuthenticationError as OpenAIAuthError
from openai import NotFoundError as OpenAINotFoundError
from openai import RateLimitError as OpenAIRateLimitError

from ..exceptions import (
    AuthenticationError,
    InvalidResponseError,
    ModelNotFoundError,
    ProviderUnavailableError,
    RateLimitError,
)
from ..logging import get_logger
from ..types import (
    FinishReason,
    Message,
    MessageRole,
    ModelResponse,
    ToolCall,
    UsageStats,
)
from .base import BaseLLMClient

logger = get_logger(__name__)


class OpenAIClient(BaseLLMClient):
    """OpenAI-compatible chat-completions client with unified response handling."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o",
        base_url: str | None = None,
        client_config: dict | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: API key. Defaults to OPENAI_API_KEY env var.
            model: Model to use. Defaults to gpt-4o.
            base_url: Optional base URL of an OpenAI-compatible endpoint.
            client_config: Optional dictionary of configuration parameters.
        """
        super().__init__(client_config)
        self.model = model
        self.base_url = base_url
        self.client = self._create_client(api_key, base_url)

    def _create_client(self, api_key: str | None, base_url: str | None) -> OpenAI:
        """Create the OpenAI SDK client."""
        return OpenAI(
            api_key=api_key or os.environ.get("OPENAI_API_KEY"),
            base_url=base_url,
        )

    def _get_supported_config_keys(self) -> set[str]:
        """Return config keys forwarded to the completions call."""
        return {
            "temperature",
            "top_p",
            "max_tokens",
            "stop",
            "presence_penalty",
            "frequency_penalty",
            "seed",
        }

    @contextmanager
    def _handle_api_errors(self):
        """Map OpenAI SDK errors onto the package exception hierarchy."""
        try:
            yield
        except OpenAIAuthError as e:
            raise AuthenticationError(f"Authentication failed: {e}") from e
        except OpenAIRateLimitError as e:
            raise RateLimitError("Rate limit exceeded") from e
        except OpenAINotFoundError as e:
            raise ModelNotFoundError(self.model) from e
        except APIStatusError as e:
            logger.error(f"model API returned status {e.status_code}: {e}")
            raise ProviderUnavailableError(f"API error ({e.status_code}): {e}") from e
        except APIConnectionError as e:
            raise ProviderUnavailableError(f"API unavailable: {e}") from e

    def generate(
        self,
        messages: list[Message],
        tools: list[dict[str, Any]] | None = None,
    ) -> ModelResponse:
        """Generate a response from the provider.

        Raises:
            AuthenticationError: If API key is invalid
            RateLimitError: If rate limit is exceeded
            ModelNotFoundError: If the model does not exist
            ProviderUnavailableError: If the API is unreachable or errors
            InvalidResponseError: If the response cannot be parsed
        """
        api_args: dict[str, Any] = {
            "model": self.model,
            "messages": self._convert_messages(messages),
        }
        if tools:
            api_args["tools"] = tools
            api_args["tool_choice"] = "auto"

        supported_keys = self._get_supported_config_keys()
        for key, value in self.client_config.items():
            if key in supported_keys:
                api_args[key] = value

        logger.debug(
            f"calling {self.model} with {len(messages)} messages and {len(tools or [])} tools"
        )
        with self._handle_api_errors():
            response = self.client.chat.completions.create(**api_args)
        return self._parse_response(response)

    def _convert_messages(self, messages: list[Message]) -> list[dict[str, Any]]:
        """Convert unified messages to OpenAI-compatible format.

        Tool calls that never received a tool message (for example because the
        tool name could not be resolved) are left out of the assistant entry,
        since the API rejects unanswered tool call ids.
        """
        answered = {
            msg.tool_call_id
            for msg in messages
            if msg.role == MessageRole.TOOL and msg.tool_call_id
        }
        return [self._convert_message(msg, answered) for msg in messages]

    def _convert_message(self, message: Message, answered: set[str]) -> dict[str, Any]:
        if message.role == MessageRole.ASSISTANT:
            return self._convert_assistant_message(message, answered)
        if message.role == MessageRole.TOOL:
            entry: dict[str, Any] = {"role": "tool", "content": message.content or ""}
            if message.tool_call_id:
                entry["tool_call_id"] = message.tool_call_id
            return entry
        return {"role": message.role.value, "content": message.content or ""}

    def _convert_assistant_message(self, message: Message, answered: set[str]) -> dict[str, Any]:
        entry: dict[str, Any] = {"role": "assistant", "content": message.content or ""}
        tool_calls = [tc for tc in message.tool_calls or [] if tc.id in answered]
        if tool_calls:
            entry["tool_calls"] = [
                {
                    "id": tc.id,
                    "type": "function",
                    "function": {"name": tc.name, "arguments": tc.arguments},
                }
                for tc in tool_calls
            ]
        return entry

    def _map_finish_reason(self, reason: str | None) -> FinishReason:
        if not reason:
            return FinishReason.STOP
        mapping = {
            "stop": FinishReason.STOP,
            "tool_calls": FinishReason.TOOL_USE,
            "length": FinishReason.LENGTH,
        }
        return mapping.get(reason, FinishReason.STOP)

    def _parse_response(self, response: Any) -> ModelResponse:
        """Parse an OpenAI-compatible response into unified format."""
        if not getattr(response, "choices", None):
            raise InvalidResponseError("no response from model")

        try:
            # n=1 is requested, so the first choice is the only one
            choice = response.choices[0]
            message = choice.message

            tool_calls = None
            if message.tool_calls:
                tool_calls = [
                    ToolCall(
                        id=tc.id,
                        name=tc.function.name,
                        arguments=tc.function.arguments or "",
                    )
                    for tc in message.tool_calls
                ]

            usage = None
            if getattr(response, "usage", None):
                usage = UsageStats(
                    prompt_tokens=response.usage.prompt_tokens,
                    completion_tokens=response.usage.completion_tokens,
                    total_tokens=response.usage.total_tokens,
                )

            return ModelResponse(
                message=Message(
                    role=MessageRole.ASSISTANT,
                    content=message.content,
                    tool_calls=tool_calls,
                ),
                finish_reason=self._map_finish_reason(choice.finish_reason),
                usage=usage,
            )
        except AttributeError as e:
            raise InvalidResponseError(
                f"Failed to parse {self.__class__.__name__} response: {e}"
            ) from e
