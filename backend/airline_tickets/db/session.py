from functools import lru_cache
import importlib.util

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from airline_tickets.core.config import settings

def normalize_database_url(url: str) -> str:
    """Point plain Postgres URLs at the psycopg (v3) driver when psycopg2 is missing.

    SQLAlchemy picks psycopg2 for 'postgresql://' by default, but only
    psycopg[binary] is a dependency here. Other URLs pass through untouched.
    """
    if not url.startswith(("postgres://", "postgresql://")) or "+psycopg" in url:
        return url
    if importlib.util.find_spec("psycopg2") is not None:
        return url
    # Normalize legacy prefix 'postgres://' -> 'postgresql://'
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url.replace("postgresql://", "postgresql+psycopg://", 1)

@lru_cache
def get_engine() -> Engine:
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL environment variable must be set to use the SQL repository")
    return create_engine(normalize_database_url(settings.database_url), pool_pre_ping=True)

@lru_cache
def get_session_factory() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
