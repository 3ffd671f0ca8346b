"""Syntax compiler: schema -> validator checking the schema itself."""

from __future__ import annotations

from collections.abc import Mapping

from ..bundle import ValidatorBundle
from ..domain.context import ValidationContext
from ..syntax.validator import SyntaxValidator
from ..validators.base import Validator


class SyntaxFactory:
    """Collect the syntax checkers of every registered keyword in a schema.

    Keywords unknown to the bundle are ignored.
    """

    def __init__(self, bundle: ValidatorBundle) -> None:
        self._bundle = bundle

    def get_validator(self, context: ValidationContext) -> Validator:
        schema = context.schema
        if not isinstance(schema, Mapping):
            return SyntaxValidator(())
        checkers = [spec.syntax for spec in self._bundle.keywords if spec.keyword in schema]
        return SyntaxValidator(checkers)
