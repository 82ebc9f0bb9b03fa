import logging

from airline_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once; uvicorn keeps its own handlers."""
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
