"""Model gateway client implementations.

All clients implement the BaseLLMClient interface and normalize
provider-specific responses to unified types.
"""

from .base import BaseLLMClient
from .factory import create_client, get_available_providers, get_default_model
from .openai import OpenAIClient

__all__ = [
    "BaseLLMClient",
    "OpenAIClient",
    "create_client",
    "get_available_providers",
    "get_default_model",
]
