"""Base constraint and validator classes.

A constraint is a plain rule descriptor (what to check); a validator holds the
checking logic (how to check it). Validators return a list of Violation
(empty = valid) and raise only for misuse.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from csscolor.errors import InvalidArgumentError
from csscolor.validators.models import Violation


class Constraint:
    """Base for rule descriptors.

    Options may be supplied as a mapping (declarative metadata) or through the
    keyword arguments of subclasses. ``groups`` and ``payload`` are carried
    for the collection layer and never read by validators.
    """

    DEFAULT_GROUP = "Default"

    ERROR_NAMES: dict[str, str] = {}

    # Option names accepted through the options mapping
    OPTIONS: tuple[str, ...] = ()

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        groups: Optional[Iterable[str]] = None,
        payload: Any = None,
    ):
        options = dict(options or {})

        groups_option = options.pop("groups", None)
        payload_option = options.pop("payload", None)

        groups = groups if groups is not None else groups_option or [self.DEFAULT_GROUP]
        if isinstance(groups, str):
            groups = [groups]
        self.groups = list(groups)
        self.payload = payload if payload is not None else payload_option

        for key, value in options.items():
            if key not in self.OPTIONS:
                raise InvalidArgumentError(
                    f'The option "{key}" does not exist in constraint "{type(self).__name__}".'
                )
            setattr(self, key, value)

    @classmethod
    def get_error_name(cls, code: str) -> str:
        """Map a violation code to its constant name."""
        if code not in cls.ERROR_NAMES:
            raise InvalidArgumentError(
                f'The error code "{code}" does not exist for constraint of type "{cls.__name__}".'
            )
        return cls.ERROR_NAMES[code]


class ConstraintValidator(ABC):
    """Abstract base for all constraint validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns a list of Violation (empty = valid)
        - validate() raises for misuse, never for invalid input
        - No I/O, no shared mutable state
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, value: Any, constraint: Constraint) -> list[Violation]:
        """Check one value against one constraint.

        Args:
            value: The value to check
            constraint: The rule descriptor to check it against

        Returns:
            List of Violation findings (empty if the value is valid)
        """
        ...

    # ── Helper Methods ──

    def _violation(
        self,
        message: str,
        value: Any,
        code: str,
        parameters: Optional[dict[str, str]] = None,
    ) -> Violation:
        """Convenience method to create a Violation with its message rendered."""
        parameters = parameters or {}
        rendered = message
        for placeholder, replacement in parameters.items():
            rendered = rendered.replace(placeholder, replacement)

        return Violation(
            message=rendered,
            message_template=message,
            parameters=parameters,
            code=code,
            invalid_value=value,
        )

    @staticmethod
    def _format_value(value: Any) -> str:
        """Render a value for use in a violation message."""
        if isinstance(value, str):
            return f'"{value}"'
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
