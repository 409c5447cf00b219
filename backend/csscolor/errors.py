"""Exceptions raised for API misuse.

A value that fails a color rule is reported as a Violation, never raised.
Everything in this module signals a programming or configuration mistake.
"""

from typing import Any


class CssColorError(Exception):
    """Base class for all csscolor exceptions."""


class InvalidArgumentError(CssColorError):
    """A rule, validator or metadata document was configured with a bad value."""


class UnexpectedTypeError(CssColorError, TypeError):
    """An argument does not have the type the callee works with."""

    def __init__(self, value: Any, expected_type: str):
        self.value = value
        self.expected_type = expected_type
        super().__init__(
            f'Expected argument of type "{expected_type}", "{debug_type(value)}" given'
        )


class UnexpectedValueError(UnexpectedTypeError):
    """The validated value cannot be treated as text."""


def debug_type(value: Any) -> str:
    """Name the runtime type of a value for error messages."""
    if value is None:
        return "None"
    return type(value).__name__
