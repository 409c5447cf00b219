"""CssColor validator — checks a value against the pattern of a color mode.

Only a pattern mismatch is reported as a Violation. Bad configuration and
values that cannot be read as text raise instead (see csscolor.errors).
"""

import re
from functools import lru_cache
from typing import Any, Union

import structlog

from csscolor.config import get_settings
from csscolor.errors import InvalidArgumentError, UnexpectedTypeError, UnexpectedValueError
from csscolor.validators.base import ConstraintValidator
from csscolor.validators.css_color import CssColor, CssColorMode, coerce_mode
from csscolor.validators.models import Violation

logger = structlog.get_logger()

PATTERN_HEX_LONG = re.compile(r"^#[0-9a-f]{6}([0-9a-f]{2})?\Z", re.IGNORECASE | re.ASCII)
PATTERN_HEX_SHORT = re.compile(r"^#[0-9a-f]{3,4}\Z", re.IGNORECASE | re.ASCII)
# Prefix match: "redwood" is accepted (see DESIGN.md)
PATTERN_NAMED_COLORS = re.compile(
    r"^(black|red|green|yellow|blue|magenta|cyan|white)", re.IGNORECASE | re.ASCII
)

COLOR_PATTERNS: dict[CssColorMode, re.Pattern] = {
    CssColorMode.HEX_LONG: PATTERN_HEX_LONG,
    CssColorMode.HEX_SHORT: PATTERN_HEX_SHORT,
    CssColorMode.NAMED_COLORS: PATTERN_NAMED_COLORS,
}

SCALAR_TYPES = (str, int, float, bool)


def _is_stringable(value: Any) -> bool:
    """Scalars, or objects whose class defines its own __str__ (raw bytes excluded)."""
    if isinstance(value, (bytes, bytearray)):
        return False
    return isinstance(value, SCALAR_TYPES) or type(value).__str__ is not object.__str__


def _to_text(value: Any) -> str:
    # Booleans render as "1" and ""; False is therefore an empty value
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


class CssColorValidator(ConstraintValidator):
    """Validates values against a CssColor rule.

    Holds only its default mode after construction, so one instance can be
    shared freely between threads.
    """

    def __init__(self, default_mode: Union[CssColorMode, str] = CssColorMode.HEX_LONG):
        mode = coerce_mode(default_mode)
        if mode is None:
            raise InvalidArgumentError('The "defaultMode" parameter value is not valid.')

        self.default_mode = mode

    @property
    def name(self) -> str:
        return "CssColorValidator"

    def resolve_mode(self, constraint: CssColor) -> CssColorMode:
        """Return the mode a rule is checked against.

        Raises:
            InvalidArgumentError: the rule's mode was reassigned to an unknown value
        """
        if constraint.mode is None:
            return self.default_mode

        mode = coerce_mode(constraint.mode)
        if mode is None:
            logger.warning(
                "css_color_mode_invalid",
                validator=self.name,
                mode=repr(constraint.mode),
            )
            raise InvalidArgumentError(
                f'The "{type(constraint).__name__}.mode" parameter value is not valid.'
            )

        return mode

    def validate(self, value: Any, constraint: CssColor) -> list[Violation]:
        """Check a value against a CssColor rule.

        The resolved mode is stored back on ``constraint.mode``.

        Returns:
            Empty list if the value is valid, absent or empty; otherwise one Violation

        Raises:
            UnexpectedTypeError: constraint is not a CssColor
            UnexpectedValueError: value cannot be converted to text, or the
                normalizer returned something other than a str
            InvalidArgumentError: constraint.mode is not a known mode
        """
        if not isinstance(constraint, CssColor):
            raise UnexpectedTypeError(constraint, CssColor.__name__)

        if value is None or (isinstance(value, str) and value == ""):
            return []

        if not _is_stringable(value):
            raise UnexpectedValueError(value, "string")

        value = _to_text(value)
        if value == "":
            return []

        candidate = value
        if constraint.normalizer is not None:
            candidate = constraint.normalizer(candidate)
            if not isinstance(candidate, str):
                raise UnexpectedValueError(candidate, "string")

        mode = self.resolve_mode(constraint)
        constraint.mode = mode

        if COLOR_PATTERNS[mode].match(candidate):
            return []

        logger.debug("css_color_violation", mode=mode.value, value=value)

        return [self._violation(
            message=constraint.message,
            value=value,
            code=CssColor.INVALID_FORMAT_ERROR,
            parameters={"{{ value }}": self._format_value(value)},
        )]


@lru_cache
def get_validator() -> CssColorValidator:
    """Shared validator configured from settings."""
    return CssColorValidator(get_settings().DEFAULT_MODE)
