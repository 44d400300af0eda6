from typing import Iterable, List, Optional

from airline_tickets.models.flight import DEFAULT_FLIGHT_STATUS
from airline_tickets.repositories.flight_repository import FlightRepository
from airline_tickets.schemas.flight import FlightDto, FlightOut


class InMemoryFlightRepository(FlightRepository):
    """List-backed repository for tests and database-less local runs."""

    def __init__(self, flights: Iterable[FlightOut] | None = None) -> None:
        self._flights: List[FlightOut] = [f.model_copy() for f in flights or []]
        self._next_id = max((f.flight_id for f in self._flights), default=0) + 1

    async def create_flight(self, flight: FlightDto) -> int:
        flight_id = self._next_id
        self._next_id += 1
        self._flights.append(
            FlightOut(
                flight_id=flight_id,
                flight_from=flight.flight_from,
                flight_to=flight.flight_to,
                flight_date=flight.flight_date,
                num_of_layovers=flight.num_of_layovers,
                num_of_seats=flight.num_of_seats,
                flight_status=DEFAULT_FLIGHT_STATUS,
            )
        )
        return flight_id

    async def get_all_flights(self) -> List[FlightOut]:
        return [f.model_copy() for f in self._flights]

    async def get_flight_by_id(self, flight_id: int) -> Optional[FlightOut]:
        for f in self._flights:
            if f.flight_id == flight_id:
                return f.model_copy()
        return None
