"""API router aggregation.

Health is registered before the paste routes so /health is never read
as a paste key.
"""

from fastapi import APIRouter

from pastebox.api.endpoints import health, pastes

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(pastes.router, tags=["pastes"])
