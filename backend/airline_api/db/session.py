from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import importlib.util
from airline_api.core.config import settings


def normalize_database_url(url: str) -> str:
    """Point plain Postgres URLs at the psycopg v3 driver when psycopg2 is absent.

    SQLAlchemy loads psycopg2 for 'postgresql://' (and the legacy 'postgres://').
    Only 'psycopg' v3 is a dependency, so the driver is injected explicitly.
    """
    if not url.startswith(("postgres://", "postgresql://")) or "+psycopg" in url:
        return url
    if importlib.util.find_spec("psycopg2") is not None:
        return url
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url.replace("postgresql://", "postgresql+psycopg://", 1)


SQLALCHEMY_DATABASE_URL = normalize_database_url(settings.database_url)

engine_kwargs: dict = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    # TestClient runs requests in a worker thread
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if SQLALCHEMY_DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        # in-memory database lives as long as its single connection
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_kwargs)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
