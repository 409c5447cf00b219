"""Validation models — the violation record and the collected report.

A Violation is the only way a failed color check is reported. Configuration
and type problems are raised from csscolor.errors instead.
"""

from typing import Any
from pydantic import BaseModel, Field


class Violation(BaseModel):
    """A single rule violation."""

    message: str                          # Template with parameters substituted
    message_template: str
    parameters: dict[str, str] = Field(default_factory=dict)
    code: str                             # Stable identifier, independent of message text
    invalid_value: Any = None
    property_path: str = ""               # Field name when collected by the engine


class ValidationReport(BaseModel):
    """Violations collected across the fields of one input."""

    passed: bool = Field(description="True if no rule reported a violation")
    violations: list[Violation] = Field(default_factory=list)
    summary: dict[str, int] = Field(
        default_factory=dict,
        description="Count of violations by property path",
    )

    @classmethod
    def build(cls, violations: list[Violation]) -> "ValidationReport":
        """Build a report from the violations of a validation run."""
        summary: dict[str, int] = {}
        for violation in violations:
            summary[violation.property_path] = summary.get(violation.property_path, 0) + 1

        return cls(
            passed=not violations,
            violations=violations,
            summary=summary,
        )
