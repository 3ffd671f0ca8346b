"""Unit tests for string keywords."""

from __future__ import annotations

import pytest


@pytest.fixture
def run(factory, make_context):
    def _run(schema, instance):
        return make_context(factory, schema).validate(instance)

    return _run


class TestLength:
    def test_bounds(self, run):
        schema = {"minLength": 2, "maxLength": 3}
        assert run(schema, "ab").success
        assert run(schema, "abc").success
        assert not run(schema, "a").success
        assert not run(schema, "abcd").success

    def test_counts_code_points(self, run):
        assert run({"maxLength": 2}, "\U0001f600é").success

    def test_messages(self, run):
        assert run({"minLength": 2}, "a").messages[0].message == (
            "string is too short (1 chars), minimum length is 2"
        )
        assert run({"maxLength": 0}, "a").messages[0].message == (
            "string is too long (1 chars), maximum length is 0"
        )

    def test_ignores_other_kinds(self, run):
        assert run({"minLength": 10}, ["a"]).success


class TestPattern:
    def test_unanchored_search(self, run):
        assert run({"pattern": "b+"}, "abbbc").success

    def test_anchored(self, run):
        schema = {"pattern": "^[a-z]+$"}
        assert run(schema, "abc").success
        report = run(schema, "abc1")
        assert report.messages[0].message == "string does not match pattern '^[a-z]+$'"

    def test_invalid_pattern_is_schema_error(self, run):
        report = run({"pattern": "[a-"}, "x")
        assert report.success is False
        assert report.messages[0].message.startswith("invalid regular expression '[a-'")
