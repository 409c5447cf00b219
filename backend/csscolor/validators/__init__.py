"""CSS color validation — rule descriptors, validator and collection engine.

Usage:
    from csscolor.validators import CssColor, CssColorMode, get_validator

    violations = get_validator().validate(value, CssColor(mode=CssColorMode.HEX_SHORT))
    if violations:
        # violations[0].code == CssColor.INVALID_FORMAT_ERROR
"""

from csscolor.validators.base import Constraint, ConstraintValidator
from csscolor.validators.css_color import CssColor, CssColorMode
from csscolor.validators.css_color_validator import COLOR_PATTERNS, CssColorValidator, get_validator
from csscolor.validators.engine import ValidationEngine, get_engine
from csscolor.validators.models import ValidationReport, Violation

__all__ = [
    "Constraint",
    "ConstraintValidator",
    "CssColor",
    "CssColorMode",
    "CssColorValidator",
    "COLOR_PATTERNS",
    "get_validator",
    "ValidationEngine",
    "get_engine",
    "ValidationReport",
    "Violation",
]
