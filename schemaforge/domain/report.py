"""Validation reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class ValidationMessage:
    """A single violation found while validating a document.

    Attributes:
        message: Human readable description of the violation.
        path: JSON pointer of the offending instance node ("" is the root).
        schema_path: JSON pointer of the schema in use, as a URI fragment.
        keyword: Keyword that reported the violation, if any.
        schema: The schema fragment in use when the violation was found.
    """

    message: str
    path: str = ""
    schema_path: str = "#"
    keyword: str | None = None
    schema: Any = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        location = f"#{self.path}"
        if self.keyword:
            return f"{location}: [{self.keyword}] {self.message}"
        return f"{location}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "path": self.path,
            "schema_path": self.schema_path,
            "keyword": self.keyword,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Pass/fail verdict with the messages that explain it.

    Reports are immutable; ``TRUE`` is the shared canonical success.
    """

    success: bool = True
    messages: tuple[ValidationMessage, ...] = ()

    TRUE: ClassVar[ValidationReport]

    @classmethod
    def succeeded(cls) -> ValidationReport:
        return cls.TRUE

    @classmethod
    def failure(cls, message: ValidationMessage | str) -> ValidationReport:
        if isinstance(message, str):
            message = ValidationMessage(message)
        return cls(success=False, messages=(message,))

    @property
    def is_success(self) -> bool:
        return self.success

    def merge(self, other: ValidationReport) -> ValidationReport:
        """AND both verdicts and concatenate messages, self first."""
        if other is ValidationReport.TRUE:
            return self
        if self is ValidationReport.TRUE:
            return other
        return ValidationReport(
            success=self.success and other.success,
            messages=self.messages + other.messages,
        )

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        if not self.messages:
            return "success" if self.success else "failure"
        return "\n".join(str(message) for message in self.messages)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "messages": [message.to_dict() for message in self.messages],
        }


ValidationReport.TRUE = ValidationReport()


def merge(left: ValidationReport, right: ValidationReport) -> ValidationReport:
    return left.merge(right)
