"""csscolor — CSS color format validation.

Usage:
    from csscolor import CssColor, CssColorValidator

    violations = CssColorValidator().validate("#C0FFEE", CssColor())
    if violations:
        # Report violations[0].message back to the user
"""

from csscolor.errors import (
    CssColorError,
    InvalidArgumentError,
    UnexpectedTypeError,
    UnexpectedValueError,
)
from csscolor.validators import (
    CssColor,
    CssColorMode,
    CssColorValidator,
    ValidationEngine,
    ValidationReport,
    Violation,
)

__all__ = [
    "CssColor",
    "CssColorMode",
    "CssColorValidator",
    "ValidationEngine",
    "ValidationReport",
    "Violation",
    "CssColorError",
    "InvalidArgumentError",
    "UnexpectedTypeError",
    "UnexpectedValueError",
]
