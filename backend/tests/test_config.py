from airline_tickets.core.config import Settings
from airline_tickets.db.session import normalize_database_url


def test_cors_defaults_when_unset():
    s = Settings(CORS_ORIGINS="")
    assert s.cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]


def test_cors_comma_list_mirrors_localhost():
    s = Settings(CORS_ORIGINS="http://localhost:3000, https://tickets.example.com")
    assert s.cors_origins == [
        "http://localhost:3000",
        "https://tickets.example.com",
        "http://127.0.0.1:3000",
    ]


def test_cors_json_list():
    s = Settings(CORS_ORIGINS='["https://a.example.com", "https://b.example.com"]')
    assert s.cors_origins == ["https://a.example.com", "https://b.example.com"]


def test_is_dev():
    assert Settings(ENV="development").is_dev
    assert not Settings(ENV="prod").is_dev


def test_normalize_database_url_leaves_sqlite_alone():
    assert normalize_database_url("sqlite:///./flights.db") == "sqlite:///./flights.db"
    assert normalize_database_url("postgresql+psycopg://u@h/db") == "postgresql+psycopg://u@h/db"
