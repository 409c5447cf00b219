"""Color validation endpoints."""

from functools import lru_cache

from fastapi import APIRouter, Depends

from csscolor.config import get_settings
from csscolor.models.requests import ValidateColorRequest, ValidateFieldsRequest
from csscolor.models.responses import ValidateColorResponse
from csscolor.validators import CssColor, CssColorValidator, ValidationEngine, ValidationReport, get_validator
from csscolor.validators.metadata import build_rule, load_rules

router = APIRouter()


@lru_cache
def get_rules() -> dict[str, list[CssColor]]:
    """Field rules loaded once from RULES_PATH (none when unset)."""
    path = get_settings().RULES_PATH
    if not path:
        return {}
    return load_rules(path)


@router.post("/validate", response_model=ValidateColorResponse)
async def validate_color(
    body: ValidateColorRequest,
    validator: CssColorValidator = Depends(get_validator),
):
    """Check a single value against a rule built from the request."""
    rule = build_rule(body.model_dump(exclude={"value"}, exclude_none=True))
    violations = validator.validate(body.value, rule)

    return ValidateColorResponse(
        valid=not violations,
        mode=validator.resolve_mode(rule).value,
        violations=violations,
    )


@router.post("/validate-fields", response_model=ValidationReport)
async def validate_fields(
    body: ValidateFieldsRequest,
    validator: CssColorValidator = Depends(get_validator),
    rules: dict[str, list[CssColor]] = Depends(get_rules),
):
    """Validate a record against the configured field rules."""
    return ValidationEngine(validator).validate(body.data, rules, body.groups)
