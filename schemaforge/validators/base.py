"""Base validator types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable

from ..domain.report import ValidationReport

if TYPE_CHECKING:
    from ..domain.context import ValidationContext


class Validator(ABC):
    """Something able to validate an instance within a context.

    Validators are stateless with respect to the documents they inspect, so a
    compiled validator can be cached and reused across calls and threads.
    """

    @abstractmethod
    def validate(self, context: ValidationContext, instance: Any) -> ValidationReport:
        """Validate ``instance`` and return the report."""


class AlwaysTrueValidator(Validator):
    """Validator used when a schema imposes nothing on an instance kind."""

    def validate(self, context: ValidationContext, instance: Any) -> ValidationReport:
        return ValidationReport.TRUE

    def __repr__(self) -> str:
        return "AlwaysTrueValidator()"


class AlwaysFalseValidator(Validator):
    """Validator replaying a failure determined at construction time."""

    def __init__(self, report: ValidationReport) -> None:
        self.report = report

    def validate(self, context: ValidationContext, instance: Any) -> ValidationReport:
        return self.report

    def __repr__(self) -> str:
        return f"AlwaysFalseValidator({self.report!s})"


class MatchAllValidator(Validator):
    """AND-composite over several validators.

    Every delegate runs against the same instance, in order, even after an
    earlier one failed; in fail-fast mode the first failure raises out of here.
    """

    def __init__(self, validators: Iterable[Validator]) -> None:
        self.validators = tuple(validators)

    def validate(self, context: ValidationContext, instance: Any) -> ValidationReport:
        report = ValidationReport.TRUE
        for validator in self.validators:
            report = report.merge(validator.validate(context, instance))
        return report

    def __repr__(self) -> str:
        return f"MatchAllValidator({list(self.validators)!r})"
