"""Main entry point for the supervisor agent CLI.

Handles provider selection, worker construction and the interaction loop.
"""

import argparse
import sys

import yaml
from pydantic import ValidationError

from .clients.base import BaseLLMClient
from .clients.factory import create_client, get_available_providers
from .config import get_settings
from .exceptions import (
    AgentError,
    AuthenticationError,
    MaxIterationsExceededError,
    ProviderUnavailableError,
    RateLimitError,
)
from .logging import setup_logging
from .multi_agent import Supervisor, create_supervisor
from .multi_agent.prompts import (
    BOOKING_SUPERVISOR_PROMPT,
    REMOTE_SUPERVISOR_PROMPT,
    format_supervisor_prompt,
)
from .multi_agent.workers import (
    create_flight_assistant,
    create_hotel_assistant,
    create_remote_assistants,
)
from .remote import MultiServerRemoteClient


def load_yaml_config(path: str = "config.yaml") -> dict:
    """Load configuration from config.yaml if it exists."""
    try:
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def get_provider_and_model(args: argparse.Namespace, yaml_config: dict) -> tuple[str | None, str | None]:
    """Determine the provider and model to use.

    Priority order:
    1. CLI arguments
    2. Config file (config.yaml)
    3. Environment variables (via pydantic settings)
    4. Auto-detection based on available API keys
    """
    settings = get_settings()
    llm_config = yaml_config.get("llm", {})

    provider = args.provider or llm_config.get("provider") or settings.detect_provider()
    model = args.model or llm_config.get("model") or settings.llm_model

    return provider, model


def build_client(provider: str, model: str | None, yaml_config: dict) -> BaseLLMClient:
    """Create the shared model client from settings and the llm config section."""
    settings = get_settings()
    llm_config = yaml_config.get("llm", {})

    client_config = {"temperature": settings.llm_temperature}
    client_config.update({
        k: v for k, v in llm_config.items()
        if k not in ["provider", "model", "base_url", "api_key"]
    })

    return create_client(
        provider,
        model,
        client_config=client_config,
        api_key=llm_config.get("api_key") or settings.get_api_key_for_provider(provider),
        base_url=llm_config.get("base_url") or settings.llm_base_url,
    )


def build_booking_supervisor(client: BaseLLMClient, max_iterations: int) -> Supervisor:
    """Supervisor over the hotel and flight booking assistants."""
    agents = [
        create_hotel_assistant(client, max_iterations=max_iterations),
        create_flight_assistant(client, max_iterations=max_iterations),
    ]
    return create_supervisor(agents, client, BOOKING_SUPERVISOR_PROMPT, max_iterations)


def build_remote_supervisor(
    client: BaseLLMClient,
    yaml_config: dict,
    max_iterations: int,
) -> Supervisor | None:
    """Supervisor over one worker per remote provider in config.yaml.

    Returns:
        The supervisor, or None if no provider yielded any tools.
    """
    remote_config = yaml_config.get("remote_tools", {})
    if not remote_config:
        print("Error: No remote_tools configuration found in config.yaml")
        return None
    if not isinstance(remote_config, dict):
        print("Error: remote_tools in config.yaml must map provider names to settings")
        return None

    try:
        remote_client = MultiServerRemoteClient(remote_config, timeout=get_settings().remote_timeout)
    except ValidationError as e:
        print(f"Error: Invalid remote_tools configuration: {e}")
        return None

    prompts = {
        name: cfg.get("prompt")
        for name, cfg in remote_config.items()
        if isinstance(cfg, dict) and cfg.get("prompt")
    }
    agents = create_remote_assistants(
        remote_client, client, prompts=prompts, max_iterations=max_iterations
    )
    for agent in agents:
        print(f"  Discovered {len(agent.tools)} tool(s) for '{agent.name}'")

    if not agents:
        print("Error: No remote tools could be discovered.")
        return None

    prompt = format_supervisor_prompt(
        "\n".join(f"- {agent.name}: {agent.description}" for agent in agents),
        template=REMOTE_SUPERVISOR_PROMPT,
    )
    return create_supervisor(agents, client, prompt, max_iterations)


def run_once(supervisor: Supervisor, query: str) -> bool:
    """Run a single request, printing the answer or the error.

    Returns:
        True if the supervisor produced an answer.
    """
    try:
        result = supervisor.invoke(query)
    except AuthenticationError as e:
        print(f"Authentication error: {e}")
        print("Please check your API key.")
    except RateLimitError as e:
        print(f"Rate limit exceeded: {e}")
        print("Please wait a moment and try again.")
    except ProviderUnavailableError as e:
        print(f"Provider unavailable: {e}")
        print("Please try again later.")
    except MaxIterationsExceededError as e:
        print(f"Gave up: {e}")
    except AgentError as e:
        print(f"Agent error: {e}")
    else:
        print(f"\nSupervisor: {result}")
        return True
    return False


def run_repl(supervisor: Supervisor) -> None:
    """Run the interactive REPL loop."""
    print(f"Supervisor initialized with {len(supervisor.agents)} workers. Type 'exit' to quit.")
    print("-" * 50)

    while True:
        try:
            user_input = input("You: ")
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break

        if user_input.lower() in ("exit", "quit"):
            print("Goodbye!")
            break

        if not user_input.strip():
            continue

        run_once(supervisor, user_input)


def main():
    """Main entry point for the supervisor agent CLI."""
    parser = argparse.ArgumentParser(description="Supervisor Agent CLI")
    parser.add_argument(
        "query",
        nargs="?",
        help="Request to run once; starts an interactive session if omitted"
    )
    parser.add_argument(
        "--provider",
        choices=get_available_providers(),
        help="LLM provider to use (overrides config and auto-detection)"
    )
    parser.add_argument(
        "--model",
        help="LLM model to use (overrides config)"
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the YAML config file (default: config.yaml)"
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Build workers from the remote_tools providers in the config file"
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        help="Cap on model calls per loop (also settable via SUPERVISOR_AGENT_MAX_ITERATIONS)"
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Print a Mermaid graph of the supervisor and its workers"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (also settable via SUPERVISOR_AGENT_LOG_LEVEL env var)"
    )
    args = parser.parse_args()

    setup_logging(args.log_level or get_settings().log_level)

    yaml_config = load_yaml_config(args.config)
    provider, model = get_provider_and_model(args, yaml_config)

    if not provider:
        print("Error: No LLM provider specified and no API keys found.")
        print("Please set one of the following:")
        print("  - LLM_PROVIDER environment variable")
        print("  - provider in config.yaml")
        print("  - DASHSCOPE_API_KEY or OPENAI_API_KEY")
        sys.exit(1)

    print(f"Using provider: {provider}")
    if model:
        print(f"Using model: {model}")

    try:
        client = build_client(provider, model, yaml_config)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    max_iterations = args.max_iterations or get_settings().max_iterations

    if args.remote:
        supervisor = build_remote_supervisor(client, yaml_config, max_iterations)
        if supervisor is None:
            sys.exit(1)
    else:
        supervisor = build_booking_supervisor(client, max_iterations)

    if args.visualize:
        print(supervisor.visualize())
        return

    if args.query:
        if not run_once(supervisor, args.query):
            sys.exit(1)
        return

    run_repl(supervisor)


if __name__ == "__main__":
    main()
