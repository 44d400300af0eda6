import logging
from functools import lru_cache

from fastapi import Depends

from airline_tickets.controllers.flight_controller import FlightController
from airline_tickets.core.config import settings
from airline_tickets.db.session import get_session_factory
from airline_tickets.repositories.flight_repository import FlightRepository
from airline_tickets.repositories.in_memory_flight_repository import InMemoryFlightRepository
from airline_tickets.repositories.sql_flight_repository import SqlFlightRepository

logger = logging.getLogger(__name__)

@lru_cache
def _build_flight_repository() -> FlightRepository:
    if settings.database_url:
        return SqlFlightRepository(get_session_factory())
    logger.warning("DATABASE_URL is not set, flights are kept in memory and lost on restart")
    return InMemoryFlightRepository()

def get_flight_repository() -> FlightRepository:
    """Process-wide repository. Tests swap it via app.dependency_overrides."""
    return _build_flight_repository()

def get_flight_controller(repository: FlightRepository = Depends(get_flight_repository)) -> FlightController:
    return FlightController(repository)
