from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from airline_tickets.models.enums import FlightDestination

# Counts are stored in 32-bit Integer columns.
INT32_MAX = 2**31 - 1

class FlightDto(BaseModel):
    """Creation payload, echoed back with ``flight_id`` once stored.

    A ``flight_id`` sent by the client is ignored; storage assigns it.
    """

    flight_id: Optional[int] = None
    flight_from: FlightDestination
    flight_to: FlightDestination
    flight_date: datetime
    num_of_layovers: int = Field(..., ge=0, le=INT32_MAX)
    num_of_seats: int = Field(..., ge=0, le=INT32_MAX)

class FlightOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    flight_id: int
    flight_from: FlightDestination
    flight_to: FlightDestination
    flight_date: datetime
    num_of_layovers: int
    num_of_seats: int
    flight_status: str

    @property
    def has_free_seats(self) -> bool:
        return self.num_of_seats > 0
