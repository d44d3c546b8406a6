"""Custom exception hierarchy for the supervisor agent.

This module defines all custom exceptions used throughout the package,
organized into logical categories: client errors, tool errors, remote
protocol errors and loop control errors.
"""


class AgentError(Exception):
    """Base exception for all agent errors."""


# =============================================================================
# Client Errors - Issues with model gateway interactions
# =============================================================================

class ClientError(AgentError):
    """Base class for model gateway errors."""


class AuthenticationError(ClientError):
    """API key is invalid or missing."""


class RateLimitError(ClientError):
    """Rate limit exceeded."""

    def __init__(self, message: str = "Rate limit exceeded", retry_after: float | None = None):
        self.retry_after = retry_after
        if retry_after:
            message = f"{message}. Retry after: {retry_after}s"
        super().__init__(message)


class ModelNotFoundError(ClientError):
    """Requested model does not exist."""

    def __init__(self, model_name: str):
        self.model_name = model_name
        super().__init__(f"Model not found: {model_name}")


class ProviderUnavailableError(ClientError):
    """Provider API is unreachable or returned a non-success status."""


class InvalidResponseError(ClientError):
    """Response from provider could not be parsed."""


# =============================================================================
# Tool Errors - Issues with tool execution
# =============================================================================

class ToolError(AgentError):
    """Base class for tool execution errors."""


class ToolNotFoundError(ToolError):
    """Requested tool does not exist."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Tool '{tool_name}' not found")


class InvalidArgumentError(ToolError):
    """Tool arguments could not be decoded into a parameter mapping."""

    def __init__(self, tool_name: str, reason: str):
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"invalid argument: {reason}")


class ToolExecutionError(ToolError):
    """Tool execution failed."""

    def __init__(self, tool_name: str, cause: Exception | str):
        self.tool_name = tool_name
        self.cause = cause
        super().__init__(f"Tool '{tool_name}' execution failed: {cause}")


# =============================================================================
# Remote Tool Errors - Issues talking to remote tool providers
# =============================================================================

class RemoteToolError(AgentError):
    """Base class for remote tool protocol errors."""

    def __init__(self, server: str, message: str):
        self.server = server
        super().__init__(message)


class RemoteConnectionError(RemoteToolError):
    """The remote provider could not be reached."""


class RemoteResponseError(RemoteToolError):
    """The remote provider answered with an error status or an undecodable body."""

    def __init__(self, server: str, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(server, message)


# =============================================================================
# Loop Control Errors
# =============================================================================

class MaxIterationsExceededError(AgentError):
    """The reasoning loop hit its iteration cap without a final answer."""

    def __init__(self, owner: str, max_iterations: int):
        self.owner = owner
        self.max_iterations = max_iterations
        super().__init__(
            f"'{owner}' did not produce a final answer within {max_iterations} iterations"
        )
