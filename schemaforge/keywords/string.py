"""String keywords."""

from __future__ import annotations

from ..domain.report import ValidationReport
from ..validators.container import compile_pattern
from .base import KeywordValidator


class MinLengthKeywordValidator(KeywordValidator):
    keyword = "minLength"

    def validate(self, context, instance):
        if len(instance) >= self.value:
            return ValidationReport.TRUE
        return self.fail(
            context, f"string is too short ({len(instance)} chars), minimum length is {self.value}"
        )


class MaxLengthKeywordValidator(KeywordValidator):
    keyword = "maxLength"

    def validate(self, context, instance):
        if len(instance) <= self.value:
            return ValidationReport.TRUE
        return self.fail(
            context, f"string is too long ({len(instance)} chars), maximum length is {self.value}"
        )


class PatternKeywordValidator(KeywordValidator):
    """Unanchored regex search, as in ECMA 262 ``RegExp.test``."""

    keyword = "pattern"

    def __init__(self, schema):
        super().__init__(schema)
        self.regex = compile_pattern(self.value)

    def validate(self, context, instance):
        if self.regex.search(instance):
            return ValidationReport.TRUE
        return self.fail(context, f"string does not match pattern {self.value!r}")
