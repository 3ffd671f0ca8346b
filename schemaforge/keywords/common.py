"""Keywords applying to every instance kind."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..domain.node import TYPE_NAMES, NodeType, classify, json_equal, resolve_pointer
from ..domain.report import ValidationReport
from .base import KeywordValidator


class TypeKeywordValidator(KeywordValidator):
    keyword = "type"

    def __init__(self, schema):
        super().__init__(schema)
        names = [self.value] if isinstance(self.value, str) else list(self.value)
        allowed = {NodeType(name) for name in names if isinstance(name, str) and name in TYPE_NAMES}
        if NodeType.NUMBER in allowed:
            allowed.add(NodeType.INTEGER)
        self.names = names
        self.allowed = frozenset(allowed)

    def validate(self, context, instance):
        kind = classify(instance)
        if kind in self.allowed:
            return ValidationReport.TRUE
        expected = ", ".join(str(name) for name in self.names)
        return self.fail(context, f"instance is of type {kind}, expected one of [{expected}]")


class EnumKeywordValidator(KeywordValidator):
    keyword = "enum"

    def validate(self, context, instance):
        if any(json_equal(instance, candidate) for candidate in self.value):
            return ValidationReport.TRUE
        return self.fail(context, "instance does not match any enum value")


class FormatKeywordValidator(KeywordValidator):
    """Look up the format validator for each instance and run it."""

    keyword = "format"

    def validate(self, context, instance):
        validator = context.factory.get_format_validator(context, self.value, instance)
        return validator.validate(context, instance)


class RefKeywordValidator(KeywordValidator):
    """Follow a local JSON reference (``#`` or ``#/json/pointer``).

    The target is resolved against the root schema each time, so the compiled
    validator only depends on the reference string.
    """

    keyword = "$ref"

    def validate(self, context, instance):
        ref = self.value
        if not ref.startswith("#"):
            return self.fail(context, f"unsupported non-local reference {ref!r}")
        try:
            target = resolve_pointer(context.root, ref)
        except LookupError:
            return self.fail(context, f"unresolvable reference {ref!r}")
        return context.with_ref(target, ref).validate(instance)


class AllOfKeywordValidator(KeywordValidator):
    keyword = "allOf"

    def validate(self, context, instance):
        report = ValidationReport.TRUE
        for index, subschema in enumerate(self.value):
            report = report.merge(context.with_schema(subschema, self.keyword, index).validate(instance))
        return report


class _MatchingKeywordValidator(KeywordValidator):
    """Keywords that need a verdict per subschema before deciding.

    Matching happens in a soft copy of the context so that a failing
    alternative cannot abort the whole run in fail-fast mode.
    """

    def matches(self, context, instance, subschemas: Any, *segments) -> list[bool]:
        trial = context.soft()
        if isinstance(subschemas, Mapping):
            return [trial.with_schema(subschemas, *segments).validate(instance).success]
        return [
            trial.with_schema(subschema, *segments, index).validate(instance).success
            for index, subschema in enumerate(subschemas)
        ]


class AnyOfKeywordValidator(_MatchingKeywordValidator):
    keyword = "anyOf"

    def validate(self, context, instance):
        if any(self.matches(context, instance, self.value, self.keyword)):
            return ValidationReport.TRUE
        return self.fail(context, "instance does not match any allowed schema")


class OneOfKeywordValidator(_MatchingKeywordValidator):
    keyword = "oneOf"

    def validate(self, context, instance):
        matched = sum(self.matches(context, instance, self.value, self.keyword))
        if matched == 1:
            return ValidationReport.TRUE
        return self.fail(
            context, f"instance matched {matched} schemas, expected exactly one"
        )


class NotKeywordValidator(_MatchingKeywordValidator):
    keyword = "not"

    def validate(self, context, instance):
        if any(self.matches(context, instance, self.value, self.keyword)):
            return self.fail(context, "instance matched a forbidden schema")
        return ValidationReport.TRUE
