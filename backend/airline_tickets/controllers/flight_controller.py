import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from airline_tickets.controllers.results import ActionResult
from airline_tickets.repositories.errors import StorageError
from airline_tickets.repositories.flight_repository import FlightRepository
from airline_tickets.schemas.flight import FlightDto

SAVE_FAILED = "Failed to save flight"
INTERNAL_ERROR = "An internal error occurred"
UNEXPECTED_ERROR = "An unexpected error occurred"
VALIDATION_TITLE = "One or more validation errors occurred."
NOT_FOUND_DETAIL = "Flight not found"


def model_errors(exc: ValidationError) -> dict[str, Any]:
    """Group pydantic errors by field: {"flight_from": ["Field required"], ...}"""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        key = ".".join(str(part) for part in err["loc"]) or "body"
        errors.setdefault(key, []).append(err["msg"])
    return {"title": VALIDATION_TITLE, "errors": errors}


def body_errors(message: str) -> dict[str, Any]:
    """Same shape as model_errors, for a body that could not be parsed at all."""
    return {"title": VALIDATION_TITLE, "errors": {"body": [message]}}


class FlightController:
    """Request handling for flights on top of a FlightRepository.

    Stateless between calls; every operation makes at most one repository
    call and turns its outcome into an ActionResult.
    """

    def __init__(self, repository: FlightRepository, logger: Optional[logging.Logger] = None) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    async def create_flight(self, payload: Union[FlightDto, Mapping[str, Any], None]) -> ActionResult:
        try:
            dto = payload if isinstance(payload, FlightDto) else FlightDto.model_validate(payload)
        except ValidationError as exc:
            self._logger.info("Rejected invalid flight payload (%d errors)", exc.error_count())
            return ActionResult.bad_request(model_errors(exc))
        dto = dto.model_copy(update={"flight_id": None})

        try:
            flight_id = await self._repository.create_flight(dto)
        except StorageError:
            self._logger.exception("Database error while saving flight")
            return ActionResult.server_error(SAVE_FAILED)
        except Exception:
            self._logger.exception("Unexpected error while saving flight")
            return ActionResult.server_error(INTERNAL_ERROR)

        self._logger.info("Created flight %s", flight_id)
        created = dto.model_copy(update={"flight_id": flight_id})
        return ActionResult.created_at_action(
            self.get_flight_by_id.__name__, {"flight_id": flight_id}, created
        )

    async def get_flights(self) -> ActionResult:
        try:
            flights = await self._repository.get_all_flights()
        except Exception:
            self._logger.exception("Error fetching flights")
            return ActionResult.server_error(UNEXPECTED_ERROR)
        return ActionResult.ok([f for f in flights if f.has_free_seats])

    async def get_flight_by_id(self, flight_id: int) -> ActionResult:
        try:
            flight = await self._repository.get_flight_by_id(flight_id)
        except Exception:
            self._logger.exception("Error fetching flight %s", flight_id)
            return ActionResult.server_error(UNEXPECTED_ERROR)
        if flight is None:
            return ActionResult.not_found({"detail": NOT_FOUND_DETAIL})
        return ActionResult.ok(flight)
