"""Domain errors raised by the booking core and their HTTP translation."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DomainError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class InvalidAirportCode(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid source or destination airport code"):
        super().__init__(message)


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidState(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class CapacityExhausted(DomainError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = "No free seat left on this flight"):
        super().__init__(message)


class SeatConflict(DomainError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = "Could not reserve a seat, please retry"):
        super().__init__(message)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
