"""Booking worker agent factories.

Creates the hotel and flight assistants used by the booking demo.
"""

from ...agent import Agent
from ...clients.base import BaseLLMClient
from ...tools.booking import BookFlightTool, BookHotelTool
from ..prompts import FLIGHT_ASSISTANT_PROMPT, HOTEL_ASSISTANT_PROMPT


def create_hotel_assistant(client: BaseLLMClient, max_iterations: int | None = 20) -> Agent:
    """Create the hotel booking assistant.

    Args:
        client: Model client for the worker.
        max_iterations: Cap on model calls per delegated task.

    Returns:
        An Agent named ``hotel_assistant`` owning the ``book_hotel`` tool.
    """
    return Agent(
        name="hotel_assistant",
        client=client,
        tools=[BookHotelTool()],
        system_prompt=HOTEL_ASSISTANT_PROMPT,
        max_iterations=max_iterations,
    )


def create_flight_assistant(client: BaseLLMClient, max_iterations: int | None = 20) -> Agent:
    """Create the flight booking assistant.

    Returns:
        An Agent named ``flight_assistant`` owning the ``book_flight`` tool.
    """
    return Agent(
        name="flight_assistant",
        client=client,
        tools=[BookFlightTool()],
        system_prompt=FLIGHT_ASSISTANT_PROMPT,
        max_iterations=max_iterations,
    )
