"""Health check endpoint."""

import time
from fastapi import APIRouter, Depends

from csscolor.models.responses import HealthResponse
from csscolor.validators import CssColorValidator, get_validator

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(validator: CssColorValidator = Depends(get_validator)):
    """Service health with the active default mode."""
    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _start_time, 2),
        default_mode=validator.default_mode.value,
    )
