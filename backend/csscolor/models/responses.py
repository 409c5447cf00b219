"""API response models."""

from pydantic import BaseModel
from typing import Literal

from csscolor.validators.models import Violation


class ValidateColorResponse(BaseModel):
    """Outcome of a single-value check."""

    valid: bool
    mode: str
    violations: list[Violation] = []


class HealthResponse(BaseModel):
    """Service health."""

    status: Literal["healthy", "unhealthy"]
    uptime_seconds: float
    default_mode: str
