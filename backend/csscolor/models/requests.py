"""API request models."""

from pydantic import BaseModel, Field
from typing import Any, Optional, Union


class ValidateColorRequest(BaseModel):
    """Request to check one value against a CssColor rule."""

    value: Optional[Union[str, int, float, bool]] = Field(
        default=None,
        description="Value to validate; null and empty string are always valid",
        examples=["#C0FFEE"],
    )
    mode: Optional[str] = Field(
        default=None,
        description="hex_long, hex_short or named_colors; defaults to the configured mode",
    )
    message: Optional[str] = None
    normalizer: Optional[str] = Field(
        default=None,
        description="Named normalizer applied before matching, e.g. 'trim'",
    )


class ValidateFieldsRequest(BaseModel):
    """Request to validate a record against the configured field rules."""

    data: dict[str, Any] = Field(default_factory=dict)
    groups: Optional[list[str]] = None
