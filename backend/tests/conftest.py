from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from airline_tickets.api.deps import get_flight_repository
from airline_tickets.main import app
from airline_tickets.models.enums import FlightDestination
from airline_tickets.repositories.in_memory_flight_repository import InMemoryFlightRepository
from airline_tickets.schemas.flight import FlightOut


@pytest.fixture
def make_flight():
    """FlightOut factory (factories as fixtures)."""

    def _factory(
        flight_id: int = 1,
        num_of_seats: int = 10,
        flight_from: FlightDestination = FlightDestination.BEOGRAD,
        flight_to: FlightDestination = FlightDestination.KRALJEVO,
        flight_date: datetime = datetime(2030, 1, 1, 10, 0),
        num_of_layovers: int = 0,
        flight_status: str = "approved",
    ) -> FlightOut:
        return FlightOut(
            flight_id=flight_id,
            flight_from=flight_from,
            flight_to=flight_to,
            flight_date=flight_date,
            num_of_layovers=num_of_layovers,
            num_of_seats=num_of_seats,
            flight_status=flight_status,
        )

    return _factory


@pytest.fixture
def flight_payload():
    return {
        "flight_from": "BEOGRAD",
        "flight_to": "KRALJEVO",
        "flight_date": "2030-01-01T10:00:00",
        "num_of_layovers": 0,
        "num_of_seats": 30,
    }


@pytest.fixture
def repository():
    return InMemoryFlightRepository()


@pytest.fixture
def client(repository):
    # No context manager: that would run the startup hook and seed demo flights.
    app.dependency_overrides[get_flight_repository] = lambda: repository
    test_client = TestClient(app)
    try:
        yield test_client
    finally:
        test_client.close()
        app.dependency_overrides.clear()
