from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional
from pathlib import Path

class Settings(BaseSettings):
    app_name: str = Field(default="AirlineTickets API", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    # Connection string; only the db layer reads it, never the controllers.
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    seed_demo_flights: bool = Field(default=True, alias="SEED_DEMO_FLIGHTS")
    # Raw env value (string), parsed to a list via property to avoid JSON decoding errors
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma or space separated list of allowed CORS origins")

    class Config:
        # Load env from backend/.env regardless of CWD
        env_file = str(Path(__file__).resolve().parents[2] / ".env")
        case_sensitive = False
        populate_by_name = True

    @property
    def is_dev(self) -> bool:
        return self.env.lower() in {"dev", "development"}

    def _parse_list(self, v: Optional[str]) -> List[str]:
        if v is None:
            return []
        s = v.strip()
        if not s:
            return []
        if s.startswith("[") and s.endswith("]"):
            try:
                import json
                loaded = json.loads(s)
                if isinstance(loaded, list):
                    return [str(e).strip() for e in loaded if str(e).strip()]
            except ValueError:
                pass
        return [e.strip() for e in s.replace(" ", ",").split(",") if e.strip()]

    @property
    def cors_origins(self) -> List[str]:
        items = self._parse_list(self.cors_origins_raw)
        # Fallback dev defaults if none provided
        if not items:
            return ["http://localhost:5173", "http://127.0.0.1:5173"]
        # Dev convenience: mirror localhost <-> 127.0.0.1 for the same port
        augmented = list(items)
        for origin in items:
            for a, b in (("http://localhost:", "http://127.0.0.1:"), ("http://127.0.0.1:", "http://localhost:")):
                if origin.startswith(a):
                    mirrored = b + origin[len(a):]
                    if mirrored not in augmented:
                        augmented.append(mirrored)
        return augmented

settings = Settings()  # type: ignore
