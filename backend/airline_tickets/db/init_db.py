import logging
from datetime import datetime, timedelta

from sqlalchemy.engine import Engine

from airline_tickets.models import flight  # noqa: F401
from airline_tickets.models.base import Base
from airline_tickets.models.enums import FlightDestination
from airline_tickets.repositories.flight_repository import FlightRepository
from airline_tickets.schemas.flight import FlightDto

logger = logging.getLogger(__name__)

def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)

def demo_flights(now: datetime | None = None) -> list[FlightDto]:
    now = (now or datetime.utcnow()).replace(minute=0, second=0, microsecond=0)
    return [
        FlightDto(flight_from=FlightDestination.BEOGRAD, flight_to=FlightDestination.KRALJEVO,
                  flight_date=now + timedelta(days=1), num_of_layovers=0, num_of_seats=30),
        FlightDto(flight_from=FlightDestination.NIS, flight_to=FlightDestination.SUBOTICA,
                  flight_date=now + timedelta(days=2), num_of_layovers=1, num_of_seats=12),
        FlightDto(flight_from=FlightDestination.NOVI_SAD, flight_to=FlightDestination.BEOGRAD,
                  flight_date=now + timedelta(days=3), num_of_layovers=0, num_of_seats=0),
    ]

async def seed_demo_data(repository: FlightRepository) -> int:
    """Insert demo flights when the store is empty. Returns how many were added."""
    if await repository.get_all_flights():
        return 0
    flights = demo_flights()
    for dto in flights:
        await repository.create_flight(dto)
    logger.info("Seeded %d demo flights", len(flights))
    return len(flights)
