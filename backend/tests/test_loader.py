"""Tests for csscolor.validators.metadata.loader - declarative rules."""

import json

import pytest

from csscolor.errors import InvalidArgumentError
from csscolor.validators import CssColorMode
from csscolor.validators.metadata import NORMALIZERS, build_rule, load_rules, resolve_normalizer

DOCUMENT = {
    "fields": {
        "a": [{}],
        "b": [{"message": "myMessage", "mode": "hex_long", "normalizer": "trim"}],
        "c": [{"groups": ["my_group"], "payload": "some attached data"}],
    }
}


class TestLoadRules:
    def test_load_from_mapping(self):
        rules = load_rules(DOCUMENT)

        [a_rule] = rules["a"]
        assert a_rule.mode is None
        assert a_rule.normalizer is None

        [b_rule] = rules["b"]
        assert b_rule.message == "myMessage"
        assert b_rule.mode is CssColorMode.HEX_LONG
        assert b_rule.normalizer is str.strip

        [c_rule] = rules["c"]
        assert c_rule.groups == ["my_group"]
        assert c_rule.payload == "some attached data"

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(DOCUMENT), encoding="utf-8")

        rules = load_rules(path)
        assert list(rules) == ["a", "b", "c"]

        rules = load_rules(str(path))
        assert rules["b"][0].mode is CssColorMode.HEX_LONG

    def test_empty_document(self):
        assert load_rules({}) == {}

    def test_unknown_mode(self):
        with pytest.raises(InvalidArgumentError, match='The "mode" parameter value is not valid.'):
            load_rules({"fields": {"a": [{"mode": "Unknown Mode"}]}})

    def test_single_group_string(self):
        rules = load_rules({"fields": {"a": [{"groups": "admin"}]}})
        assert rules["a"][0].groups == ["admin"]

    def test_unknown_normalizer(self):
        with pytest.raises(InvalidArgumentError, match=r'\("str" given\)'):
            load_rules({"fields": {"a": [{"normalizer": "Unknown Callable"}]}})

    @pytest.mark.parametrize(
        "document",
        [
            ["not", "a", "mapping"],
            {"fields": ["a"]},
            {"fields": {"a": {"mode": "hex_long"}}},
            {"fields": {"a": ["hex_long"]}},
        ],
    )
    def test_malformed_documents(self, document):
        with pytest.raises(InvalidArgumentError):
            load_rules(document)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidArgumentError, match="Cannot read rule metadata"):
            load_rules(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidArgumentError, match="not valid JSON"):
            load_rules(path)


class TestNormalizers:
    @pytest.mark.parametrize("name", sorted(NORMALIZERS))
    def test_named_normalizers_are_callable(self, name):
        assert callable(resolve_normalizer(name))

    def test_callable_passes_through(self):
        assert resolve_normalizer(str.casefold) is str.casefold

    def test_build_rule_with_named_normalizer(self):
        rule = build_rule({"normalizer": "lower"})
        assert rule.normalizer("#ABC") == "#abc"
