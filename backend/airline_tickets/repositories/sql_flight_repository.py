import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool

from airline_tickets.models.flight import DEFAULT_FLIGHT_STATUS, Flight
from airline_tickets.repositories.errors import RepositoryError, StorageError, UnknownError
from airline_tickets.repositories.flight_repository import FlightRepository
from airline_tickets.schemas.flight import FlightDto, FlightOut

logger = logging.getLogger(__name__)


class SqlFlightRepository(FlightRepository):
    """SQLAlchemy-backed FlightRepository.

    Each call opens its own session and runs the blocking ORM work in the
    threadpool, so the event loop only ever awaits it.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    async def create_flight(self, flight: FlightDto) -> int:
        return await run_in_threadpool(self._create_flight, flight)

    async def get_all_flights(self) -> List[FlightOut]:
        return await run_in_threadpool(self._get_all_flights)

    async def get_flight_by_id(self, flight_id: int) -> Optional[FlightOut]:
        return await run_in_threadpool(self._get_flight_by_id, flight_id)

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning("Database error during %s: %s", action, e.__class__.__name__)
            raise StorageError(f"Database failure during {action}") from e
        except RepositoryError:
            raise
        except Exception as e:
            db.rollback()
            raise UnknownError(f"Unexpected failure during {action}") from e
        finally:
            db.close()

    def _create_flight(self, dto: FlightDto) -> int:
        with self._session("create flight") as db:
            f = Flight(
                flight_from=dto.flight_from,
                flight_to=dto.flight_to,
                flight_date=dto.flight_date,
                num_of_layovers=dto.num_of_layovers,
                num_of_seats=dto.num_of_seats,
                flight_status=DEFAULT_FLIGHT_STATUS,
            )
            db.add(f)
            db.commit()
            db.refresh(f)
            return f.flight_id

    def _get_all_flights(self) -> List[FlightOut]:
        with self._session("list flights") as db:
            rows = db.scalars(select(Flight).order_by(Flight.flight_id)).all()
            return [FlightOut.model_validate(f) for f in rows]

    def _get_flight_by_id(self, flight_id: int) -> Optional[FlightOut]:
        with self._session("get flight") as db:
            f = db.get(Flight, flight_id)
            if not f:
                return None
            return FlightOut.model_validate(f)
