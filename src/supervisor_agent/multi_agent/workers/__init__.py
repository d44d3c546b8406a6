"""Predefined worker agents.

This module provides factory functions for the booking demo workers and for
workers backed by remote tool providers.
"""

from .booking import create_flight_assistant, create_hotel_assistant
from .remote import create_remote_assistant, create_remote_assistants

__all__ = [
    "create_flight_assistant",
    "create_hotel_assistant",
    "create_remote_assistant",
    "create_remote_assistants",
]
