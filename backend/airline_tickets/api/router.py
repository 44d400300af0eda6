from fastapi import APIRouter

from airline_tickets.api.routes import health, flights

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])  # GET /
api_router.include_router(flights.router, prefix="/flights", tags=["flights"])  # GET /, POST /, GET /{flight_id}
