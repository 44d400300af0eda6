from abc import ABC, abstractmethod
from typing import List, Optional

from airline_tickets.schemas.flight import FlightDto, FlightOut


class FlightRepository(ABC):
    """Persistence for flights.

    Implementations raise StorageError when the data store fails and
    UnknownError for anything else, chaining the original exception.
    """

    @abstractmethod
    async def create_flight(self, flight: FlightDto) -> int:
        """Store a new flight and return its assigned id"""
        raise NotImplementedError

    @abstractmethod
    async def get_all_flights(self) -> List[FlightOut]:
        raise NotImplementedError

    @abstractmethod
    async def get_flight_by_id(self, flight_id: int) -> Optional[FlightOut]:
        """Return the flight, or None when no such id exists"""
        raise NotImplementedError
