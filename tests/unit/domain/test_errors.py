"""Unit tests for domain error hierarchy."""

from __future__ import annotations

from schemaforge.domain.errors import (
    BundleError,
    InvalidDocumentError,
    SchemaForgeError,
    ValidationFailureError,
)
from schemaforge.domain.report import ValidationMessage


class TestErrorHierarchy:
    def test_all_errors_inherit_from_schemaforge_error(self):
        errors = [
            ValidationFailureError(ValidationMessage("bad")),
            InvalidDocumentError(object()),
            BundleError("dup"),
        ]
        for err in errors:
            assert isinstance(err, SchemaForgeError)

    def test_invalid_document_is_type_error(self):
        assert isinstance(InvalidDocumentError(b""), TypeError)


class TestSpecificErrors:
    def test_validation_failure_carries_message(self):
        message = ValidationMessage(
            "too short", path="/name", schema_path="#/properties/name", keyword="minLength",
            schema={"minLength": 3},
        )
        err = ValidationFailureError(message)
        assert err.message is message
        assert err.path == "/name"
        assert err.schema == {"minLength": 3}
        assert "too short" in str(err)

    def test_invalid_document_stores_value(self):
        value = {1, 2}
        err = InvalidDocumentError(value)
        assert err.value is value
        assert "set" in str(err)
