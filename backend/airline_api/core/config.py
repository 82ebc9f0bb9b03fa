from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional
from pathlib import Path

class Settings(BaseSettings):
    app_name: str = Field(default="Airline Ticket Reservation API", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Postgres (psycopg v3) in prod; SQLite is fine for local runs and tests
    database_url: str = Field(default="sqlite:///./airline.db", alias="DATABASE_URL")
    auto_apply_migrations: bool = Field(default=True, alias="AUTO_APPLY_MIGRATIONS")
    seed_airports: bool = Field(default=True, alias="SEED_AIRPORTS")
    # How many times a booking/seat change is retried after losing a seat race
    seat_allocation_attempts: int = Field(default=5, ge=1, alias="SEAT_ALLOCATION_ATTEMPTS")
    # Raw env value (string), parsed to a list via property to avoid JSON decoding errors
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma or space separated list of allowed CORS origins")

    class Config:
        # Load env from backend/.env regardless of CWD
        env_file = str(Path(__file__).resolve().parents[2] / ".env")
        case_sensitive = False
        extra = "ignore"

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
        if not items:
            return ["http://localhost:8080", "http://127.0.0.1:8080"]
        return items

    @property
    def is_prod(self) -> bool:
        return self.env.lower() == "prod"

    @property
    def is_dev(self) -> bool:
        return self.env.lower() in {"dev", "development"}

settings = Settings()  # type: ignore
