"""Unit tests for array keywords and element descent."""

from __future__ import annotations

import pytest


@pytest.fixture
def run(factory, make_context):
    def _run(schema, instance):
        return make_context(factory, schema).validate(instance)

    return _run


class TestSize:
    def test_min_max_items(self, run):
        schema = {"minItems": 1, "maxItems": 2}
        assert run(schema, [1]).success
        assert run(schema, []).messages[0].message == "array has 0 items, minimum is 1"
        assert run(schema, [1, 2, 3]).messages[0].message == "array has 3 items, maximum is 2"


class TestUniqueItems:
    def test_unique(self, run):
        assert run({"uniqueItems": True}, [1, "1", True, None, [1], {"a": 1}]).success

    @pytest.mark.parametrize("instance", [[1, 1.0], [{"a": [1]}, {"a": [1]}], [None, None]])
    def test_duplicates(self, run, instance):
        report = run({"uniqueItems": True}, instance)
        assert report.messages[0].message == "array items are not unique"

    def test_false_allows_duplicates(self, run):
        assert run({"uniqueItems": False}, [1, 1]).success


class TestItems:
    def test_single_schema_applies_to_every_element(self, run):
        report = run({"items": {"type": "string"}}, ["a", 1, "b", None])
        assert [m.path for m in report.messages] == ["/1", "/3"]
        assert {m.schema_path for m in report.messages} == {"#/items"}

    def test_tuple_items(self, run):
        schema = {"items": [{"type": "string"}, {"type": "integer"}]}
        assert run(schema, ["a", 1, "anything", None]).success
        report = run(schema, [1, "a"])
        assert [(m.path, m.schema_path) for m in report.messages] == [
            ("/0", "#/items/0"),
            ("/1", "#/items/1"),
        ]

    def test_additional_items_schema(self, run):
        schema = {"items": [{"type": "string"}], "additionalItems": {"type": "integer"}}
        assert run(schema, ["a", 1, 2]).success
        report = run(schema, ["a", 1, "b"])
        assert report.messages[0].path == "/2"
        assert report.messages[0].schema_path == "#/additionalItems"

    def test_additional_items_false(self, run):
        schema = {"items": [{}, {}], "additionalItems": False}
        assert run(schema, [1, 2]).success
        report = run(schema, [1, 2, 3])
        assert report.messages[0].message == "array has 3 items, no more than 2 allowed"

    def test_additional_items_ignored_with_single_items(self, run):
        schema = {"items": {"type": "integer"}, "additionalItems": False}
        assert run(schema, [1, 2, 3]).success

    def test_keyword_failure_still_descends(self, run):
        report = run({"maxItems": 1, "items": {"type": "integer"}}, ["a", 2])
        assert [m.keyword for m in report.messages] == ["maxItems", "type"]
