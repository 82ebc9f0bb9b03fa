import os

# Must be set before airline_api is imported: the engine is built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"

import pytest  # noqa: E402

from airline_api.db.session import SessionLocal, engine  # noqa: E402
from airline_api.models import airport, ticket  # noqa: F401,E402
from airline_api.models.base import Base  # noqa: E402
from airline_api.services.airport_directory import AirportDirectory  # noqa: E402


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def airports(db):
    directory = AirportDirectory(db)
    directory.insert("JFK", "John F. Kennedy International Airport", "USA")
    directory.insert("LAX", "Los Angeles International Airport", "USA")
    return directory
