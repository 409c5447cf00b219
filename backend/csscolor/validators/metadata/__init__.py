"""Declarative rule metadata — JSON documents describing CssColor rules per field."""

from csscolor.validators.metadata.loader import NORMALIZERS, build_rule, load_rules, resolve_normalizer

__all__ = ["NORMALIZERS", "build_rule", "load_rules", "resolve_normalizer"]
