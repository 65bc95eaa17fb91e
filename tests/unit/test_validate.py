"""Tests for Spec validation."""

import pytest
from returns.result import Failure, Success

from jrx import RenderOptions, SpecValidator, ValidationError, check_spec, jsx, render, validate_spec
from tests.catalog import Badge, Button, Card, List, ListItem, Select, Stack, Text


def codes(result):
    return [issue.code for issue in result.issues]


class TestRenderedSpecs:
    """Specs produced by render() are structurally valid."""

    def test_single_element(self):
        result = validate_spec(render(jsx(Text, {"text": "hello"})))
        assert result.valid
        assert result.issues == []

    def test_deep_tree(self, validator):
        spec = render(
            jsx(
                Stack,
                {
                    "children": [
                        jsx(Card, {"title": "X", "children": [jsx(Text, {"text": "n"}), jsx(Badge, {"text": "t"})]}),
                        jsx(Button, {"label": "action"}),
                    ]
                },
            )
        )
        result = validator.check(spec)
        assert result.valid
        assert "missing_child" not in codes(result)
        assert "orphaned_element" not in codes(result)

    def test_all_features_combined(self, full_state):
        spec = render(
            jsx(
                Stack,
                {
                    "children": [
                        jsx(Text, {"text": "header", "visible": {"$state": "/showHeader"}}),
                        jsx(
                            List,
                            {
                                "repeat": {"statePath": "/items", "key": "id"},
                                "children": jsx(
                                    ListItem,
                                    {"title": {"$item": "name"}, "on": {"press": {"action": "selectItem"}}},
                                ),
                            },
                        ),
                        jsx(Select, {"label": "Country", "watch": {"/country": {"action": "loadCities"}}}),
                        jsx(
                            Button,
                            {
                                "label": "Submit",
                                "on": {"press": [{"action": "validateForm"}, {"action": "submitForm"}]},
                            },
                        ),
                    ]
                },
            ),
            RenderOptions(state=full_state),
        )
        result = validate_spec(spec, check_orphans=True)
        assert result.valid
        assert result.issues == []


class TestBrokenSpecs:
    """Hand-written specs with structural problems."""

    def test_invalid_structure(self):
        result = validate_spec({"root": "a"})
        assert not result.valid
        assert codes(result) == ["invalid_structure"]

    def test_empty_root(self):
        result = validate_spec({"root": "", "elements": {}})
        assert codes(result) == ["empty_spec"]

    def test_root_not_found(self):
        result = validate_spec({"root": "main", "elements": {"other": {"type": "Card", "props": {}}}})
        assert "root_not_found" in codes(result)
        assert not result.valid

    def test_missing_child(self):
        spec = {"root": "a", "elements": {"a": {"type": "Stack", "props": {}, "children": ["ghost"]}}}
        result = validate_spec(spec)
        assert codes(result) == ["missing_child"]
        assert result.issues[0].element_key == "a"

    @pytest.mark.parametrize("name", ["visible", "on", "repeat", "watch"])
    def test_reserved_field_in_props(self, name):
        spec = {"root": "a", "elements": {"a": {"type": "Text", "props": {name: {"x": 1}}}}}
        result = validate_spec(spec)
        assert codes(result) == [f"{name}_in_props"]
        assert not result.valid

    def test_orphans_are_warnings(self, validator):
        spec = {
            "root": "a",
            "elements": {"a": {"type": "Card", "props": {}}, "b": {"type": "Text", "props": {}}},
        }
        result = validator.check(spec)
        assert codes(result) == ["orphaned_element"]
        assert result.issues[0].severity == "warning"
        assert result.valid

    def test_orphans_ignored_by_default(self):
        spec = {
            "root": "a",
            "elements": {"a": {"type": "Card", "props": {}}, "b": {"type": "Text", "props": {}}},
        }
        assert validate_spec(spec).issues == []


class TestStrictValidation:
    """SpecValidator.validate raises on errors."""

    def test_raises_on_error(self):
        with pytest.raises(ValidationError, match="ghost"):
            SpecValidator().validate(
                {"root": "a", "elements": {"a": {"type": "Stack", "props": {}, "children": ["ghost"]}}}
            )

    def test_passes_rendered_spec(self):
        SpecValidator().validate(render(jsx(Card, {"children": jsx(Text, {})})))


class TestResultPattern:
    """check_spec returns a Result."""

    def test_success(self):
        spec = render(jsx(Card, {}))
        result = check_spec(spec)
        assert isinstance(result, Success)
        assert result.unwrap() is spec

    def test_failure(self):
        result = check_spec({"root": "missing", "elements": {}})
        assert isinstance(result, Failure)
        assert not result.failure().valid
