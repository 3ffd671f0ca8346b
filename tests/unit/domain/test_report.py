"""Unit tests for validation reports."""

from __future__ import annotations

import pytest

from schemaforge.domain.report import ValidationMessage, ValidationReport, merge


class TestValidationReport:
    def test_true_is_success_without_messages(self):
        assert ValidationReport.TRUE.success is True
        assert ValidationReport.TRUE.messages == ()

    def test_succeeded_returns_shared_instance(self):
        assert ValidationReport.succeeded() is ValidationReport.TRUE

    def test_immutable(self):
        with pytest.raises(AttributeError):
            ValidationReport.TRUE.success = False  # type: ignore[misc]

    def test_failure_from_string(self):
        report = ValidationReport.failure("boom")
        assert report.success is False
        assert report.messages == (ValidationMessage("boom"),)

    def test_bool_follows_success(self):
        assert ValidationReport.TRUE
        assert not ValidationReport.failure("boom")


class TestMerge:
    def test_success_and_success(self):
        assert merge(ValidationReport.TRUE, ValidationReport.TRUE) is ValidationReport.TRUE

    def test_success_and_failure(self):
        failure = ValidationReport.failure("a")
        assert merge(ValidationReport.TRUE, failure) is failure
        assert merge(failure, ValidationReport.TRUE) is failure

    def test_messages_concatenated_in_call_order(self):
        first = ValidationReport.failure("first")
        second = ValidationReport.failure("second")
        merged = first.merge(second)
        assert merged.success is False
        assert [m.message for m in merged.messages] == ["first", "second"]

    def test_success_with_messages_keeps_them(self):
        noted = ValidationReport(success=True, messages=(ValidationMessage("note"),))
        merged = noted.merge(ValidationReport.failure("bad"))
        assert merged.success is False
        assert [m.message for m in merged.messages] == ["note", "bad"]


class TestRendering:
    def test_message_str_includes_pointer_and_keyword(self):
        message = ValidationMessage("missing", path="/a/0", keyword="required")
        assert str(message) == "#/a/0: [required] missing"

    def test_message_str_without_keyword(self):
        assert str(ValidationMessage("bad")) == "#: bad"

    def test_to_dict(self):
        report = ValidationReport.failure(
            ValidationMessage("bad", path="/x", schema_path="#/properties/x", keyword="type")
        )
        assert report.to_dict() == {
            "success": False,
            "messages": [
                {
                    "path": "/x",
                    "schema_path": "#/properties/x",
                    "keyword": "type",
                    "message": "bad",
                }
            ],
        }

    def test_schema_fragment_ignored_by_equality(self):
        assert ValidationMessage("x", schema={"a": 1}) == ValidationMessage("x", schema={"b": 2})
