"""Object keywords.

Descent into members is the job of ``ObjectValidator``; the keywords here
only look at the object as a whole.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..domain.report import ValidationReport
from ..validators.container import compile_pattern
from .base import KeywordValidator


class RequiredKeywordValidator(KeywordValidator):
    keyword = "required"

    def validate(self, context, instance):
        missing = [name for name in self.value if name not in instance]
        if not missing:
            return ValidationReport.TRUE
        names = ", ".join(repr(name) for name in missing)
        return self.fail(context, f"missing required properties: {names}")


class MinPropertiesKeywordValidator(KeywordValidator):
    keyword = "minProperties"

    def validate(self, context, instance):
        if len(instance) >= self.value:
            return ValidationReport.TRUE
        return self.fail(context, f"object has {len(instance)} properties, minimum is {self.value}")


class MaxPropertiesKeywordValidator(KeywordValidator):
    keyword = "maxProperties"

    def validate(self, context, instance):
        if len(instance) <= self.value:
            return ValidationReport.TRUE
        return self.fail(context, f"object has {len(instance)} properties, maximum is {self.value}")


class AdditionalPropertiesKeywordValidator(KeywordValidator):
    """``false`` forbids members matched by no ``properties`` or pattern."""

    keyword = "additionalProperties"

    def __init__(self, schema):
        super().__init__(schema)
        properties = schema.get("properties")
        patterns = schema.get("patternProperties")
        self.names = frozenset(properties) if isinstance(properties, Mapping) else frozenset()
        self.patterns = (
            [compile_pattern(pattern) for pattern in patterns]
            if isinstance(patterns, Mapping)
            else []
        )

    def validate(self, context, instance):
        if self.value is not False:
            return ValidationReport.TRUE
        extra = sorted(
            name
            for name in instance
            if name not in self.names and not any(p.search(name) for p in self.patterns)
        )
        if not extra:
            return ValidationReport.TRUE
        names = ", ".join(repr(name) for name in extra)
        return self.fail(context, f"additional properties not allowed: {names}")


class DependenciesKeywordValidator(KeywordValidator):
    """Property dependencies (name lists) and schema dependencies."""

    keyword = "dependencies"

    def validate(self, context, instance):
        report = ValidationReport.TRUE
        for name in sorted(self.value):
            if name not in instance:
                continue
            dependency = self.value[name]
            if isinstance(dependency, Mapping):
                report = report.merge(
                    context.with_schema(dependency, self.keyword, name).validate(instance)
                )
                continue
            missing = [other for other in dependency if other not in instance]
            if missing:
                names = ", ".join(repr(other) for other in missing)
                report = report.merge(
                    self.fail(context, f"property {name!r} requires properties: {names}")
                )
        return report
