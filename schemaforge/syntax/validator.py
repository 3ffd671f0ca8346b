"""Validator checking a schema document against its keyword syntax rules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Sequence

from ..domain.node import classify
from ..domain.report import ValidationReport
from ..validators.base import Validator

if TYPE_CHECKING:
    from ..domain.context import ValidationContext
    from .checkers import SyntaxChecker


class SyntaxValidator(Validator):
    """Run the syntax checkers of every known keyword found in a schema.

    The "instance" handed to ``validate`` is the schema itself.
    """

    def __init__(self, checkers: Sequence[SyntaxChecker]) -> None:
        self.checkers = tuple(checkers)

    def validate(self, context: ValidationContext, instance: Any) -> ValidationReport:
        if not isinstance(instance, Mapping):
            return context.failure(f"schema is not an object (found {classify(instance)})")
        report = ValidationReport.TRUE
        for checker in self.checkers:
            report = report.merge(checker.validate(context, instance))
        return report

    def __repr__(self) -> str:
        return f"SyntaxValidator({[checker.keyword for checker in self.checkers]!r})"
