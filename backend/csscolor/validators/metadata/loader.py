"""Rule metadata loader — builds CssColor rules from declarative documents.

A document maps field names to lists of rule options:

    {"fields": {"background": [{"mode": "hex_long", "normalizer": "trim"}]}}

Normalizers are given by name. Unknown modes and normalizers are rejected by
CssColor itself, so declarative rules fail exactly like direct construction.
"""

import json
from pathlib import Path
from typing import Any, Callable, Mapping, Union

from csscolor.errors import InvalidArgumentError
from csscolor.validators.css_color import CssColor

NORMALIZERS: dict[str, Callable[[str], str]] = {
    "trim": str.strip,
    "strip": str.strip,
    "ltrim": str.lstrip,
    "rtrim": str.rstrip,
    "lower": str.lower,
    "upper": str.upper,
}


def resolve_normalizer(normalizer: Any) -> Any:
    """Look up a named normalizer; anything else is returned unchanged."""
    if isinstance(normalizer, str):
        return NORMALIZERS.get(normalizer, normalizer)
    return normalizer


def build_rule(options: Mapping[str, Any]) -> CssColor:
    """Build one CssColor from its declarative options."""
    if not isinstance(options, Mapping):
        raise InvalidArgumentError(
            f"Rule options must be a mapping, got {type(options).__name__}."
        )

    options = dict(options)
    if "normalizer" in options:
        options["normalizer"] = resolve_normalizer(options["normalizer"])

    return CssColor(options)


def _read_document(path: Union[str, Path]) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidArgumentError(f"Cannot read rule metadata '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Rule metadata '{path}' is not valid JSON: {e}") from e


def load_rules(source: Union[Mapping[str, Any], str, Path]) -> dict[str, list[CssColor]]:
    """Load rules per field from a mapping or a JSON file.

    Args:
        source: Metadata document, or the path of a JSON file holding one

    Returns:
        Dict of field name → list of CssColor rules, in document order

    Raises:
        InvalidArgumentError: malformed document, unknown mode or bad normalizer
    """
    document = _read_document(source) if isinstance(source, (str, Path)) else source

    if not isinstance(document, Mapping):
        raise InvalidArgumentError("Rule metadata must be a mapping.")

    fields = document.get("fields", {})
    if not isinstance(fields, Mapping):
        raise InvalidArgumentError('Rule metadata "fields" must be a mapping.')

    rules: dict[str, list[CssColor]] = {}
    for field, options_list in fields.items():
        if not isinstance(options_list, list):
            raise InvalidArgumentError(f'Rules for field "{field}" must be a list.')
        rules[field] = [build_rule(options) for options in options_list]

    return rules
