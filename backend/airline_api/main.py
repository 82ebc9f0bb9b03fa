import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from airline_api.api.router import api_router
from airline_api.core.config import settings
from airline_api.core.errors import register_exception_handlers
from airline_api.core.logging import configure_logging
from airline_api.db.init_db import create_tables, seed_airports

configure_logging()
logger = logging.getLogger(__name__)

def _run_migrations_if_needed():
    """Apply Alembic migrations automatically in production if enabled.

    Controlled by env var AUTO_APPLY_MIGRATIONS (default: on). Safe to run repeatedly.
    """
    if not settings.is_prod or not settings.auto_apply_migrations:
        return
    from alembic import command
    from alembic.config import Config
    backend_dir = Path(__file__).resolve().parents[1]
    alembic_ini = backend_dir / "alembic.ini"
    if not alembic_ini.exists():
        logger.warning("[migrate] alembic.ini not found at %s, skipping auto-migrations", alembic_ini)
        return
    cfg = Config(str(alembic_ini))
    # Ensure script_location resolves correctly when launched from arbitrary CWD
    cfg.set_main_option("script_location", str(backend_dir / "alembic"))
    logger.info("[migrate] Applying Alembic migrations -> head ...")
    try:
        command.upgrade(cfg, "head")
    except Exception:  # pragma: no cover
        # Do not kill the app on migration failure; can be retried manually.
        logger.exception("[migrate] Migration failed")
        return
    logger.info("[migrate] Migrations applied successfully")

app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    description="API for managing airports and airplane tickets",
)

origins = settings.cors_origins
logger.debug("[startup] Resolved CORS origins: %s", origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)

@app.on_event("startup")
def startup():
    _run_migrations_if_needed()
    if settings.is_dev:
        # no migrations in dev: build the schema from the models
        create_tables()
        if settings.seed_airports:
            seed_airports()
