"""Factory for creating model gateway clients.

This module provides a centralized way to create clients based on provider
name, using a registry of OpenAI-compatible endpoints.
"""

import os
from typing import Any

from .base import BaseLLMClient
from .openai import OpenAIClient

# registry of provider configurations
_PROVIDER_REGISTRY: dict[str, dict[str, Any]] = {
    "openai": {
        "api_key_env": "OPENAI_API_KEY",
        "default_model": "gpt-4o",
        "base_url": None,
    },
    "dashscope": {
        "api_key_env": "DASHSCOPE_API_KEY",
        "default_model": "qwen-plus",
        # the compatible-mode base url already includes /v1
        "base_url": "https://dashscope.aliyuncs.com/compatible-mode/v1",
    },
}


def get_available_providers() -> list[str]:
    """Get list of available provider names."""
    return list(_PROVIDER_REGISTRY.keys())


def get_default_model(provider: str) -> str:
    """Get the default model for a provider.

    Raises:
        ValueError: If provider is unknown.
    """
    if provider not in _PROVIDER_REGISTRY:
        raise ValueError(f"Unknown provider: {provider}. Available: {get_available_providers()}")
    return _PROVIDER_REGISTRY[provider]["default_model"]


def create_client(
    provider: str,
    model: str | None = None,
    client_config: dict | None = None,
    api_key: str | None = None,
    base_url: str | None = None,
) -> BaseLLMClient:
    """Create a model gateway client for the specified provider.

    Args:
        provider: The provider name (openai, dashscope).
        model: Optional model override. If not provided, uses provider default.
        client_config: Optional configuration dict for the client (temperature, ...).
        api_key: Optional API key. If not provided, reads from environment.
        base_url: Optional endpoint override. If not provided, uses provider default.

    Returns:
        An initialized client instance.

    Raises:
        ValueError: If provider is unknown or API key is not available.
    """
    if provider not in _PROVIDER_REGISTRY:
        raise ValueError(f"Unknown provider: {provider}. Available: {get_available_providers()}")

    config = _PROVIDER_REGISTRY[provider]

    resolved_key = api_key or os.getenv(config["api_key_env"])
    if not resolved_key:
        raise ValueError(f"{config['api_key_env']} not set in environment")

    return OpenAIClient(
        api_key=resolved_key,
        model=model or config["default_model"],
        base_url=base_url or config["base_url"],
        client_config=client_config,
    )
