"""Stand-in booking tools used by the demo hotel and flight assistants."""

from typing import Any

from .base import BaseTool


class BookHotelTool(BaseTool):
    @property
    def name(self) -> str:
        return "book_hotel"

    @property
    def description(self) -> str:
        return "Book a hotel. Requires the name of the hotel."

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "hotel_name": {"type": "string", "description": "Name of the hotel."},
            },
            "required": ["hotel_name"],
        }

    def execute(self, hotel_name: str = "") -> str:
        return f"Successfully booked hotel: {hotel_name}"


class BookFlightTool(BaseTool):
    @property
    def name(self) -> str:
        return "book_flight"

    @property
    def description(self) -> str:
        return "Book a flight. Requires the departure and arrival airports."

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "from_airport": {"type": "string", "description": "Departure airport."},
                "to_airport": {"type": "string", "description": "Arrival airport."},
            },
            "required": ["from_airport", "to_airport"],
        }

    def execute(self, from_airport: str = "", to_airport: str = "") -> str:
        return f"Successfully booked flight: {from_airport} -> {to_airport}"
