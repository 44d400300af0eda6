import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from airline_tickets.api.deps import get_flight_repository
from airline_tickets.api.router import api_router
from airline_tickets.core.config import settings
from airline_tickets.core.logging_config import configure_logging
from airline_tickets.db.init_db import create_tables, seed_demo_data
from airline_tickets.db.session import get_engine

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")

# Configurable CORS origins (CORS_ORIGINS env). If empty -> dev defaults.
origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

@app.on_event("startup")
async def startup():
    configure_logging(settings.log_level)
    logger.info("Resolved CORS origins: %s", origins)
    if settings.database_url:
        create_tables(get_engine())
    if settings.is_dev and settings.seed_demo_flights:
        await seed_demo_data(get_flight_repository())
