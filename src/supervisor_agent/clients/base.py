"""Base class for model gateway clients.

Every provider client inherits from BaseLLMClient and implements the
normalization methods to convert between provider-specific formats and the
unified types. The agent loops only ever call ``generate``.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..types import Message, ModelResponse


class BaseLLMClient(ABC):
    """Abstract base class for all model gateway clients.

    Each client is responsible for:
    1. Converting the Message list to provider format
    2. Making the (blocking, non-streaming) API call
    3. Converting the response back to a ModelResponse

    Transport failures surface as ``ClientError`` subclasses; the loops treat
    them as fatal for the current invocation and never retry.
    """

    def __init__(self, client_config: dict | None = None):
        """Initialize the client.

        Args:
            client_config: Optional dictionary of configuration parameters
                           (e.g. temperature, max_tokens, etc.)
        """
        self.client_config = client_config or {}

    @abstractmethod
    def generate(
        self,
        messages: list[Message],
        tools: list[dict[str, Any]] | None = None,
    ) -> ModelResponse:
        """Generate a response from the model.

        Args:
            messages: Conversation history in unified format
            tools: Optional model-facing tool schemas
                (``{"type": "function", "function": {...}}``)

        Returns:
            ModelResponse carrying either text content or tool calls
        """

    @abstractmethod
    def _convert_messages(self, messages: list[Message]) -> Any:
        """Convert unified messages to provider-specific format."""

    @abstractmethod
    def _parse_response(self, response: Any) -> ModelResponse:
        """Parse provider response into unified format.

        Args:
            response: Raw response from the provider API

        Returns:
            ModelResponse with normalized message and metadata
        """
