"""Numeric keywords."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..domain.report import ValidationReport
from .base import KeywordValidator


def _decimal(value) -> Decimal:
    # repr keeps the shortest round-tripping form of floats
    return Decimal(repr(value))


class MinimumKeywordValidator(KeywordValidator):
    keyword = "minimum"

    def __init__(self, schema):
        super().__init__(schema)
        self.exclusive = schema.get("exclusiveMinimum") is True

    def validate(self, context, instance):
        if instance > self.value:
            return ValidationReport.TRUE
        if instance == self.value and not self.exclusive:
            return ValidationReport.TRUE
        relation = "less than or equal to" if self.exclusive else "less than"
        return self.fail(context, f"number {instance} is {relation} the minimum {self.value}")


class MaximumKeywordValidator(KeywordValidator):
    keyword = "maximum"

    def __init__(self, schema):
        super().__init__(schema)
        self.exclusive = schema.get("exclusiveMaximum") is True

    def validate(self, context, instance):
        if instance < self.value:
            return ValidationReport.TRUE
        if instance == self.value and not self.exclusive:
            return ValidationReport.TRUE
        relation = "greater than or equal to" if self.exclusive else "greater than"
        return self.fail(context, f"number {instance} is {relation} the maximum {self.value}")


class MultipleOfKeywordValidator(KeywordValidator):
    """Divisibility computed on decimals so that 0.3 is a multiple of 0.1."""

    keyword = "multipleOf"

    def __init__(self, schema):
        super().__init__(schema)
        self.divisor = _decimal(self.value)

    def validate(self, context, instance):
        try:
            remainder = _decimal(instance) % self.divisor
        except InvalidOperation:
            return self.fail(context, f"number {instance} cannot be divided by {self.value}")
        if remainder == 0:
            return ValidationReport.TRUE
        return self.fail(context, f"number {instance} is not a multiple of {self.value}")
