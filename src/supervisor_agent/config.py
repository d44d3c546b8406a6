"""centralized configuration management using pydantic settings.

this module provides type-safe, validated configuration for the supervisor
agent. configuration is loaded from environment variables and optional .env
files; remote tool providers are declared in config.yaml.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RemoteServerConfig(BaseModel):
    """connection settings for one remote tool provider.

    attributes:
        url: endpoint serving both the discovery stream and tool calls
        headers: extra request headers forwarded on every call
        transport: transport kind, only server-sent events are supported
    """

    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    transport: Literal["sse"] = "sse"


class Settings(BaseSettings):
    """main settings class for the supervisor agent.

    attributes:
        openai_api_key: api key for openai
        dashscope_api_key: api key for dashscope (openai-compatible endpoint)
        llm_provider: explicit provider selection (auto-detected if not set)
        llm_model: model to use (provider default if not set)
        llm_base_url: override for the provider's chat-completions base url
        llm_temperature: sampling temperature sent with every request
        max_iterations: cap on model calls per agent/supervisor loop
        remote_timeout: timeout in seconds for remote tool provider calls
        log_level: logging level (DEBUG, INFO, WARNING, ERROR)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # api keys for llm providers
    openai_api_key: str | None = None
    dashscope_api_key: str | None = None

    # llm configuration
    llm_provider: str | None = Field(default=None, alias="LLM_PROVIDER")
    llm_model: str | None = Field(default=None, alias="LLM_MODEL")
    llm_base_url: str | None = Field(default=None, alias="LLM_BASE_URL")
    llm_temperature: float = Field(default=0.7, ge=0.0, le=2.0, alias="LLM_TEMPERATURE")

    # agent configuration
    max_iterations: int = Field(default=20, ge=1, alias="SUPERVISOR_AGENT_MAX_ITERATIONS")
    remote_timeout: float = Field(default=30.0, gt=0, alias="SUPERVISOR_AGENT_REMOTE_TIMEOUT")
    log_level: str = Field(default="WARNING", alias="SUPERVISOR_AGENT_LOG_LEVEL")

    def detect_provider(self) -> str | None:
        """auto-detect provider based on available api keys.

        returns:
            provider name or None if no keys are set
        """
        if self.llm_provider:
            return self.llm_provider
        if self.dashscope_api_key:
            return "dashscope"
        if self.openai_api_key:
            return "openai"
        return None

    def get_api_key_for_provider(self, provider: str) -> str | None:
        """get the api key for a specific provider."""
        key_map = {
            "openai": self.openai_api_key,
            "dashscope": self.dashscope_api_key,
        }
        return key_map.get(provider)


@lru_cache
def get_settings() -> Settings:
    """get the singleton settings instance.

    call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
