"""Multi-agent system for delegated task execution.

This module provides a Supervisor-Worker pattern in which every worker is
exposed to the supervisor's model as a tool named after the worker.

Architecture:
    Supervisor
        |
        +-- sends the request to its model, one tool per worker
        +-- runs the requested worker with the given task
        +-- feeds the worker's answer back until the model stops delegating
        |
        v
    Agent(s)
        - hotel_assistant: books hotels
        - flight_assistant: books flights
        - <provider>_assistant: tools discovered on a remote provider

Example usage:
    from supervisor_agent.clients import create_client
    from supervisor_agent.multi_agent import (
        create_flight_assistant,
        create_hotel_assistant,
        create_supervisor,
    )
    from supervisor_agent.multi_agent.prompts import BOOKING_SUPERVISOR_PROMPT

    client = create_client("dashscope")
    supervisor = create_supervisor(
        [create_hotel_assistant(client), create_flight_assistant(client)],
        client,
        BOOKING_SUPERVISOR_PROMPT,
    )
    answer = supervisor.invoke("Book a flight from Beijing to Shanghai, then a hotel there.")
"""

from .supervisor import Supervisor, create_supervisor
from .tools import create_delegation_tool, delegation_parameters
from .workers import (
    create_flight_assistant,
    create_hotel_assistant,
    create_remote_assistant,
    create_remote_assistants,
)

__all__ = [
    # core classes
    "Supervisor",
    # tools
    "create_delegation_tool",
    "delegation_parameters",
    # factory functions
    "create_supervisor",
    "create_flight_assistant",
    "create_hotel_assistant",
    "create_remote_assistant",
    "create_remote_assistants",
]
