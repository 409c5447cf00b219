"""Validation Engine — runs CssColor rules over the fields of an input.

Usage:
    engine = ValidationEngine()
    report = engine.validate({"background": "#C0FFEE"}, {"background": [CssColor()]})
    if not report.passed:
        # report.violations carry the field name in property_path
"""

import time
from functools import lru_cache
from typing import Any, Iterable, Mapping, Optional

import structlog

from csscolor.validators.base import Constraint
from csscolor.validators.css_color import CssColor
from csscolor.validators.css_color_validator import CssColorValidator, get_validator
from csscolor.validators.models import ValidationReport, Violation

logger = structlog.get_logger()


class ValidationEngine:
    """Collects the violations of many (field, rule) pairs into one report."""

    def __init__(self, validator: Optional[CssColorValidator] = None):
        """Initialize with the shared validator or a custom one.

        Args:
            validator: Optional validator. If None, uses get_validator().
        """
        self.validator = validator or get_validator()

    def validate(
        self,
        data: Mapping[str, Any],
        rules: Mapping[str, list[CssColor]],
        groups: Optional[Iterable[str]] = None,
    ) -> ValidationReport:
        """Validate every field that has rules attached.

        Args:
            data: Field values; missing fields are validated as None
            rules: Rules per field name
            groups: Only rules in one of these groups run (default: "Default")

        Returns:
            ValidationReport with every violation found
        """
        start_time = time.perf_counter()
        active_groups = set(groups or [Constraint.DEFAULT_GROUP])

        violations: list[Violation] = []
        for field, field_rules in rules.items():
            value = data.get(field)
            for rule in field_rules:
                if active_groups.isdisjoint(rule.groups):
                    continue
                for violation in self.validator.validate(value, rule):
                    violations.append(violation.model_copy(update={"property_path": field}))

        report = ValidationReport.build(violations)

        logger.info(
            "validation_complete",
            passed=report.passed,
            fields=len(rules),
            groups=sorted(active_groups),
            total_violations=len(violations),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return report


@lru_cache
def get_engine() -> ValidationEngine:
    return ValidationEngine()
