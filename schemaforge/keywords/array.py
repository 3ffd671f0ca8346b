"""Array keywords.

Descent into elements is the job of ``ArrayValidator``; the keywords here
only look at the array as a whole.
"""

from __future__ import annotations

from ..domain.node import json_equal
from ..domain.report import ValidationReport
from .base import KeywordValidator


class MinItemsKeywordValidator(KeywordValidator):
    keyword = "minItems"

    def validate(self, context, instance):
        if len(instance) >= self.value:
            return ValidationReport.TRUE
        return self.fail(context, f"array has {len(instance)} items, minimum is {self.value}")


class MaxItemsKeywordValidator(KeywordValidator):
    keyword = "maxItems"

    def validate(self, context, instance):
        if len(instance) <= self.value:
            return ValidationReport.TRUE
        return self.fail(context, f"array has {len(instance)} items, maximum is {self.value}")


class UniqueItemsKeywordValidator(KeywordValidator):
    keyword = "uniqueItems"

    def validate(self, context, instance):
        if self.value is not True:
            return ValidationReport.TRUE
        for index, element in enumerate(instance):
            for other in instance[index + 1:]:
                if json_equal(element, other):
                    return self.fail(context, "array items are not unique")
        return ValidationReport.TRUE


class AdditionalItemsKeywordValidator(KeywordValidator):
    """Only ``false`` next to an array-form ``items`` constrains anything."""

    keyword = "additionalItems"

    def __init__(self, schema):
        super().__init__(schema)
        items = schema.get("items")
        self.limit = len(items) if self.value is False and isinstance(items, list) else None

    def validate(self, context, instance):
        if self.limit is None or len(instance) <= self.limit:
            return ValidationReport.TRUE
        return self.fail(
            context,
            f"array has {len(instance)} items, no more than {self.limit} allowed",
        )
