"""Tool implementations for the supervisor agent.

All tools inherit from BaseTool and implement the execute method.
"""

from .base import BaseTool, FunctionTool
from .booking import BookFlightTool, BookHotelTool
from .registry import ToolRegistry, decode_arguments

__all__ = [
    "BaseTool",
    "FunctionTool",
    "BookFlightTool",
    "BookHotelTool",
    "ToolRegistry",
    "decode_arguments",
]
