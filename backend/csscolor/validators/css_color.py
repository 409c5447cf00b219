"""CssColor rule descriptor and the color modes it can select."""

from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from csscolor.errors import InvalidArgumentError, debug_type
from csscolor.validators.base import Constraint


class CssColorMode(str, Enum):
    """Color syntax families a CssColor rule can check against."""

    HEX_LONG = "hex_long"          # #RRGGBB or #RRGGBBAA
    HEX_SHORT = "hex_short"        # #RGB or #RGBA
    NAMED_COLORS = "named_colors"  # The eight base color keywords


def coerce_mode(value: Any) -> Optional[CssColorMode]:
    """Return the CssColorMode for a mode token, or None if it is not one."""
    try:
        return CssColorMode(value)
    except (ValueError, TypeError):
        return None


class CssColor(Constraint):
    """Declares that a value must be a CSS color in the given mode.

    A ``mode`` of None defers to the validator's default mode. The mode is
    checked here and again by the validator on every call, since callers may
    reassign it after construction.
    """

    INVALID_FORMAT_ERROR = "454ab47b-aacf-4059-8f26-184b2dc9d48d"

    ERROR_NAMES = {
        INVALID_FORMAT_ERROR: "INVALID_FORMAT_ERROR",
    }

    OPTIONS = ("message", "mode", "normalizer")

    message = "This value is not a valid hexadecimal color."
    mode: Optional[CssColorMode] = None
    normalizer: Optional[Callable[[str], str]] = None

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        message: Optional[str] = None,
        mode: Optional[Union[CssColorMode, str]] = None,
        normalizer: Optional[Callable[[str], str]] = None,
        groups: Optional[Iterable[str]] = None,
        payload: Any = None,
    ):
        if options is not None and "mode" in options and coerce_mode(options["mode"]) is None:
            raise InvalidArgumentError('The "mode" parameter value is not valid.')
        if mode is not None and coerce_mode(mode) is None:
            raise InvalidArgumentError('The "mode" parameter value is not valid.')

        super().__init__(options, groups, payload)

        if message is not None:
            self.message = message
        if mode is not None:
            self.mode = mode
        if normalizer is not None:
            self.normalizer = normalizer

        if self.mode is not None:
            self.mode = coerce_mode(self.mode)

        if self.normalizer is not None and not callable(self.normalizer):
            raise InvalidArgumentError(
                'The "normalizer" option must be a valid callable '
                f'("{debug_type(self.normalizer)}" given).'
            )

    def __repr__(self) -> str:
        mode = self.mode.value if isinstance(self.mode, CssColorMode) else self.mode
        return f"CssColor(mode={mode!r}, groups={self.groups!r})"
