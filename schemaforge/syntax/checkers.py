"""Syntax checkers for the keywords of the default bundle.

A checker validates the value one keyword takes inside a schema. Checkers for
keywords holding subschemas also syntax-check those subschemas, so a single
successful check of a root schema marks everything below it as validated.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..domain.node import TYPE_NAMES, NodeType, classify, json_equal
from ..domain.report import ValidationReport
from ..validators.base import Validator

if TYPE_CHECKING:
    from ..domain.context import ValidationContext


def _unique(values: list[Any]) -> bool:
    return not any(
        json_equal(value, other)
        for index, value in enumerate(values)
        for other in values[index + 1:]
    )


def check_subschema(context: ValidationContext, subschema: Any, *segments: str | int) -> ValidationReport:
    """Syntax-check a subschema unless the factory already validated it."""
    factory = context.factory
    if factory.is_validated(subschema):
        return ValidationReport.TRUE
    return factory.validate_schema(context.with_schema(subschema, *segments))


class SyntaxChecker(Validator):
    """Check that a keyword's value has one of the expected kinds.

    Subclasses refine the check through ``check``.
    """

    def __init__(self, keyword: str, *kinds: NodeType) -> None:
        self.keyword = keyword
        self.kinds = frozenset(kinds)

    def validate(self, context: ValidationContext, instance: Any) -> ValidationReport:
        value = instance[self.keyword]
        kind = classify(value)
        if self.kinds and kind not in self.kinds:
            expected = ", ".join(sorted(str(k) for k in self.kinds))
            return self.fail(context, f"value is of type {kind}, expected one of [{expected}]")
        return self.check(context, value)

    def check(self, context: ValidationContext, value: Any) -> ValidationReport:
        return ValidationReport.TRUE

    def fail(self, context: ValidationContext, message: str) -> ValidationReport:
        return context.failure(message, keyword=self.keyword)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keyword!r})"


class NonNegativeIntegerSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str) -> None:
        super().__init__(keyword, NodeType.INTEGER)

    def check(self, context, value):
        if value < 0:
            return self.fail(context, f"value must be a non-negative integer, found {value}")
        return ValidationReport.TRUE


class DivisorSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str) -> None:
        super().__init__(keyword, NodeType.INTEGER, NodeType.NUMBER)

    def check(self, context, value):
        if value <= 0:
            return self.fail(context, f"value must be strictly positive, found {value}")
        return ValidationReport.TRUE


class ExclusiveBoundSyntaxChecker(SyntaxChecker):
    """``exclusiveMinimum``/``exclusiveMaximum``: booleans requiring their bound."""

    def __init__(self, keyword: str, bound: str) -> None:
        super().__init__(keyword, NodeType.BOOLEAN)
        self.bound = bound

    def validate(self, context, instance):
        report = super().validate(context, instance)
        if self.bound not in instance:
            report = report.merge(self.fail(context, f"keyword requires {self.bound!r} to be present"))
        return report


class RegexSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str) -> None:
        super().__init__(keyword, NodeType.STRING)

    def check(self, context, value):
        try:
            re.compile(value)
        except re.error as exc:
            return self.fail(context, f"invalid regular expression {value!r}: {exc}")
        return ValidationReport.TRUE


class TypeSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str = "type") -> None:
        super().__init__(keyword, NodeType.STRING, NodeType.ARRAY)

    def check(self, context, value):
        names = [value] if isinstance(value, str) else value
        if not names:
            return self.fail(context, "type array must not be empty")
        if not _unique(names):
            return self.fail(context, "type array elements must be unique")
        report = ValidationReport.TRUE
        for name in names:
            if not isinstance(name, str) or name not in TYPE_NAMES:
                report = report.merge(self.fail(context, f"unknown type {name!r}"))
        return report


class EnumSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str = "enum") -> None:
        super().__init__(keyword, NodeType.ARRAY)

    def check(self, context, value):
        if not value:
            return self.fail(context, "enum must not be empty")
        if not _unique(value):
            return self.fail(context, "enum elements must be unique")
        return ValidationReport.TRUE


class PropertyNamesSyntaxChecker(SyntaxChecker):
    """Non-empty array of unique strings, as used by ``required``."""

    def __init__(self, keyword: str) -> None:
        super().__init__(keyword, NodeType.ARRAY)

    def check(self, context, value):
        if not value:
            return self.fail(context, "array must not be empty")
        if any(classify(name) is not NodeType.STRING for name in value):
            return self.fail(context, "array elements must be strings")
        if not _unique(value):
            return self.fail(context, "array elements must be unique")
        return ValidationReport.TRUE


class SubschemaSyntaxChecker(SyntaxChecker):
    """A single subschema (``not``, ``additionalItems``, ...)."""

    def check(self, context, value):
        if isinstance(value, Mapping):
            return check_subschema(context, value, self.keyword)
        return ValidationReport.TRUE


class SchemaArraySyntaxChecker(SyntaxChecker):
    """A non-empty array of subschemas (``allOf``, ``anyOf``, ``oneOf``)."""

    def __init__(self, keyword: str) -> None:
        super().__init__(keyword, NodeType.ARRAY)

    def check(self, context, value):
        if not value:
            return self.fail(context, "array must not be empty")
        report = ValidationReport.TRUE
        for index, subschema in enumerate(value):
            if not isinstance(subschema, Mapping):
                report = report.merge(
                    self.fail(context, f"element {index} is of type {classify(subschema)}, expected object")
                )
                continue
            report = report.merge(check_subschema(context, subschema, self.keyword, index))
        return report


class ItemsSyntaxChecker(SyntaxChecker):
    """``items``: a subschema or an array of subschemas."""

    def __init__(self, keyword: str = "items") -> None:
        super().__init__(keyword, NodeType.OBJECT, NodeType.ARRAY)

    def check(self, context, value):
        if isinstance(value, Mapping):
            return check_subschema(context, value, self.keyword)
        report = ValidationReport.TRUE
        for index, subschema in enumerate(value):
            if not isinstance(subschema, Mapping):
                report = report.merge(
                    self.fail(context, f"element {index} is of type {classify(subschema)}, expected object")
                )
                continue
            report = report.merge(check_subschema(context, subschema, self.keyword, index))
        return report


class SchemaMapSyntaxChecker(SyntaxChecker):
    """An object whose members are subschemas (``properties``, ``definitions``).

    With ``regex_keys`` set, member names must also be valid regexes.
    """

    def __init__(self, keyword: str, regex_keys: bool = False) -> None:
        super().__init__(keyword, NodeType.OBJECT)
        self.regex_keys = regex_keys

    def check(self, context, value):
        report = ValidationReport.TRUE
        for name in sorted(value):
            if self.regex_keys:
                try:
                    re.compile(name)
                except re.error as exc:
                    report = report.merge(
                        self.fail(context, f"invalid regular expression {name!r}: {exc}")
                    )
                    continue
            subschema = value[name]
            if not isinstance(subschema, Mapping):
                report = report.merge(
                    self.fail(context, f"member {name!r} is of type {classify(subschema)}, expected object")
                )
                continue
            report = report.merge(check_subschema(context, subschema, self.keyword, name))
        return report


class DependenciesSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str = "dependencies") -> None:
        super().__init__(keyword, NodeType.OBJECT)

    def check(self, context, value):
        report = ValidationReport.TRUE
        for name in sorted(value):
            dependency = value[name]
            if isinstance(dependency, Mapping):
                report = report.merge(check_subschema(context, dependency, self.keyword, name))
            elif isinstance(dependency, list) and not isinstance(dependency, str):
                if not all(isinstance(other, str) for other in dependency) or not _unique(dependency):
                    report = report.merge(
                        self.fail(context, f"dependency {name!r} must be an array of unique strings")
                    )
            else:
                report = report.merge(
                    self.fail(context, f"dependency {name!r} is of type {classify(dependency)}")
                )
        return report
