import logging

from airline_api.db.session import engine, SessionLocal
from airline_api.models import airport  # noqa: F401
from airline_api.models import ticket  # noqa: F401
from airline_api.models.base import Base
from airline_api.models.airport import Airport
from airline_api.services.airport_directory import AirportDirectory

logger = logging.getLogger(__name__)

DEFAULT_AIRPORTS = [
    {"code": "JFK", "name": "John F. Kennedy International Airport", "country": "USA"},
    {"code": "LAX", "name": "Los Angeles International Airport", "country": "USA"},
]

def create_tables():
    Base.metadata.create_all(bind=engine)

def seed_airports(airports: list[dict] | None = None) -> list[Airport]:
    """Insert the default airports that are not there yet. Safe to run repeatedly."""
    created = []
    # keep loaded attributes readable after each insert's commit and after close
    db = SessionLocal(expire_on_commit=False)
    try:
        directory = AirportDirectory(db)
        for data in airports or DEFAULT_AIRPORTS:
            if directory.resolve_code(data["code"]) is not None:
                continue
            created.append(directory.insert(data["code"], data["name"], data["country"]))
        if created:
            logger.info("Seeded airports: %s", ", ".join(a.code for a in created))
    finally:
        db.close()
    return created
