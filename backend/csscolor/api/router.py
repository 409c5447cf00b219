"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from csscolor.api.health import router as health_router
from csscolor.api.colors import router as colors_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Color validation
api_router.include_router(colors_router, prefix="/colors", tags=["Colors"])
