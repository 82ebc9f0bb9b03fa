from fastapi import APIRouter

from airline_api.api.routes import health, airports, tickets

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])  # GET /
api_router.include_router(airports.router, prefix="/airports", tags=["Airports"])  # GET /, POST /
api_router.include_router(tickets.router, prefix="/tickets", tags=["Tickets"])  # GET /, POST /, PATCH /{id}/cancel, PATCH /{id}/seat
