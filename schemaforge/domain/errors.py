"""Domain specific exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .report import ValidationMessage


class SchemaForgeError(Exception):
    """Base class for every error raised by schemaforge."""


class ValidationFailureError(SchemaForgeError):
    """Raised on the first violation when fail-fast mode is enabled."""

    def __init__(self, message: ValidationMessage) -> None:
        self.message = message
        super().__init__(str(message))

    @property
    def path(self) -> str:
        return self.message.path

    @property
    def schema(self) -> object:
        return self.message.schema


class InvalidDocumentError(SchemaForgeError, TypeError):
    """Raised when a value outside the JSON data model reaches the engine."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"not a JSON value: {type(value).__name__}")


class BundleError(SchemaForgeError):
    """Raised when a keyword or format registration is invalid."""
