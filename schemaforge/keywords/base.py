"""Keyword validator base class."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Mapping

from ..domain.report import ValidationReport
from ..validators.base import Validator

if TYPE_CHECKING:
    from ..domain.context import ValidationContext


class KeywordValidator(Validator):
    """Validator for one schema keyword.

    Instances are built from the schema holding the keyword so that sibling
    keywords (``exclusiveMinimum`` next to ``minimum``, ...) are available.
    """

    keyword: ClassVar[str]

    def __init__(self, schema: Mapping[str, Any]) -> None:
        self.schema = schema
        self.value = schema[self.keyword]

    def fail(self, context: ValidationContext, message: str) -> ValidationReport:
        return context.failure(message, keyword=self.keyword)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"
