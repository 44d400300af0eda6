from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from airline_tickets.api.deps import get_flight_controller
from airline_tickets.controllers.flight_controller import FlightController, body_errors
from airline_tickets.controllers.results import ActionResult

router = APIRouter()

def to_response(request: Request, result: ActionResult) -> JSONResponse:
    headers = {}
    if result.action_name:
        headers["Location"] = str(request.url_for(result.action_name, **result.route_values))
    return JSONResponse(status_code=result.status_code, content=jsonable_encoder(result.value), headers=headers)

# Both "" and "/" so front-end calls without the trailing slash skip the 307 redirect.
@router.get("")
@router.get("/")
async def list_flights(request: Request, controller: FlightController = Depends(get_flight_controller)):
    """Flights that still have free seats."""
    return to_response(request, await controller.get_flights())

@router.get("/{flight_id}", name="get_flight_by_id")
async def flight_detail(flight_id: int, request: Request, controller: FlightController = Depends(get_flight_controller)):
    return to_response(request, await controller.get_flight_by_id(flight_id))

@router.post("", status_code=201)
@router.post("/", status_code=201)
async def create_flight(request: Request, controller: FlightController = Depends(get_flight_controller)):
    # Body read by hand: bad JSON gets the controller's 400 shape, not FastAPI's 422.
    try:
        payload = await request.json()
    except ValueError:
        return to_response(request, ActionResult.bad_request(body_errors("Request body is not valid JSON")))
    return to_response(request, await controller.create_flight(payload))
