"""Keyword, syntax and format registrations.

A ``ValidatorBundle`` tells the engine which keywords exist, how to check
their syntax, which instance kinds they apply to and how to validate them. The
engine itself knows no keyword; ``default_bundle()`` returns the draft-04 style
set shipped with the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Mapping

from .domain.errors import BundleError
from .domain.node import NUMERIC_TYPES, NodeType
from .formats.validators import DEFAULT_FORMATS, FormatValidator, HostnameFormatValidator
from .keywords import array, common, numeric, object as object_keywords, string
from .keywords.base import KeywordValidator
from .syntax import checkers
from .syntax.checkers import SyntaxChecker

ALL_TYPES = frozenset(NodeType)


@dataclass(frozen=True, slots=True)
class KeywordSpec:
    """Registration of one keyword.

    ``validator`` is ``None`` for keywords that only carry data for others
    (``items``, ``properties``, ``definitions``, ...).
    """

    keyword: str
    syntax: SyntaxChecker
    validator: type[KeywordValidator] | None = None
    kinds: frozenset[NodeType] = ALL_TYPES


class ValidatorBundle:
    """Ordered registry of keywords and named formats.

    Registration order is the order in which keyword validators run.
    """

    def __init__(
        self,
        keywords: Iterable[KeywordSpec] = (),
        formats: Mapping[str, FormatValidator] | None = None,
    ) -> None:
        self._keywords: dict[str, KeywordSpec] = {}
        self._formats: dict[str, FormatValidator] = dict(formats or {})
        for spec in keywords:
            self.register_keyword(spec)

    def register_keyword(self, spec: KeywordSpec) -> None:
        if spec.keyword in self._keywords:
            raise BundleError(f"keyword {spec.keyword!r} already registered")
        if spec.syntax.keyword != spec.keyword:
            raise BundleError(
                f"syntax checker for {spec.syntax.keyword!r} registered as {spec.keyword!r}"
            )
        if spec.validator is not None and spec.validator.keyword != spec.keyword:
            raise BundleError(
                f"validator for {spec.validator.keyword!r} registered as {spec.keyword!r}"
            )
        self._keywords[spec.keyword] = spec

    def unregister_keyword(self, keyword: str) -> None:
        if keyword not in self._keywords:
            raise BundleError(f"keyword {keyword!r} is not registered")
        del self._keywords[keyword]

    def register_format(self, name: str, validator: FormatValidator) -> None:
        if name in self._formats:
            raise BundleError(f"format {name!r} already registered")
        self._formats[name] = validator

    def keyword(self, keyword: str) -> KeywordSpec | None:
        return self._keywords.get(keyword)

    def format(self, name: str) -> FormatValidator | None:
        return self._formats.get(name)

    @property
    def keywords(self) -> tuple[KeywordSpec, ...]:
        return tuple(self._keywords.values())

    @property
    def formats(self) -> Mapping[str, FormatValidator]:
        return dict(self._formats)

    def copy(self) -> ValidatorBundle:
        return ValidatorBundle(self._keywords.values(), self._formats)


def _default_keywords() -> list[KeywordSpec]:
    string_kind = frozenset({NodeType.STRING})
    array_kind = frozenset({NodeType.ARRAY})
    object_kind = frozenset({NodeType.OBJECT})
    subschema_kinds = (NodeType.BOOLEAN, NodeType.OBJECT)

    return [
        KeywordSpec("$ref", checkers.SyntaxChecker("$ref", NodeType.STRING), common.RefKeywordValidator),
        KeywordSpec("type", checkers.TypeSyntaxChecker(), common.TypeKeywordValidator),
        KeywordSpec("enum", checkers.EnumSyntaxChecker(), common.EnumKeywordValidator),
        KeywordSpec("allOf", checkers.SchemaArraySyntaxChecker("allOf"), common.AllOfKeywordValidator),
        KeywordSpec("anyOf", checkers.SchemaArraySyntaxChecker("anyOf"), common.AnyOfKeywordValidator),
        KeywordSpec("oneOf", checkers.SchemaArraySyntaxChecker("oneOf"), common.OneOfKeywordValidator),
        KeywordSpec("not", checkers.SubschemaSyntaxChecker("not", NodeType.OBJECT), common.NotKeywordValidator),
        KeywordSpec("format", checkers.SyntaxChecker("format", NodeType.STRING), common.FormatKeywordValidator),
        # numbers
        KeywordSpec("minimum", checkers.SyntaxChecker("minimum", *NUMERIC_TYPES), numeric.MinimumKeywordValidator, NUMERIC_TYPES),
        KeywordSpec("exclusiveMinimum", checkers.ExclusiveBoundSyntaxChecker("exclusiveMinimum", "minimum")),
        KeywordSpec("maximum", checkers.SyntaxChecker("maximum", *NUMERIC_TYPES), numeric.MaximumKeywordValidator, NUMERIC_TYPES),
        KeywordSpec("exclusiveMaximum", checkers.ExclusiveBoundSyntaxChecker("exclusiveMaximum", "maximum")),
        KeywordSpec("multipleOf", checkers.DivisorSyntaxChecker("multipleOf"), numeric.MultipleOfKeywordValidator, NUMERIC_TYPES),
        # strings
        KeywordSpec("minLength", checkers.NonNegativeIntegerSyntaxChecker("minLength"), string.MinLengthKeywordValidator, string_kind),
        KeywordSpec("maxLength", checkers.NonNegativeIntegerSyntaxChecker("maxLength"), string.MaxLengthKeywordValidator, string_kind),
        KeywordSpec("pattern", checkers.RegexSyntaxChecker("pattern"), string.PatternKeywordValidator, string_kind),
        # arrays
        KeywordSpec("items", checkers.ItemsSyntaxChecker()),
        KeywordSpec("additionalItems", checkers.SubschemaSyntaxChecker("additionalItems", *subschema_kinds), array.AdditionalItemsKeywordValidator, array_kind),
        KeywordSpec("minItems", checkers.NonNegativeIntegerSyntaxChecker("minItems"), array.MinItemsKeywordValidator, array_kind),
        KeywordSpec("maxItems", checkers.NonNegativeIntegerSyntaxChecker("maxItems"), array.MaxItemsKeywordValidator, array_kind),
        KeywordSpec("uniqueItems", checkers.SyntaxChecker("uniqueItems", NodeType.BOOLEAN), array.UniqueItemsKeywordValidator, array_kind),
        # objects
        KeywordSpec("required", checkers.PropertyNamesSyntaxChecker("required"), object_keywords.RequiredKeywordValidator, object_kind),
        KeywordSpec("minProperties", checkers.NonNegativeIntegerSyntaxChecker("minProperties"), object_keywords.MinPropertiesKeywordValidator, object_kind),
        KeywordSpec("maxProperties", checkers.NonNegativeIntegerSyntaxChecker("maxProperties"), object_keywords.MaxPropertiesKeywordValidator, object_kind),
        KeywordSpec("properties", checkers.SchemaMapSyntaxChecker("properties")),
        KeywordSpec("patternProperties", checkers.SchemaMapSyntaxChecker("patternProperties", regex_keys=True)),
        KeywordSpec("additionalProperties", checkers.SubschemaSyntaxChecker("additionalProperties", *subschema_kinds), object_keywords.AdditionalPropertiesKeywordValidator, object_kind),
        KeywordSpec("dependencies", checkers.DependenciesSyntaxChecker(), object_keywords.DependenciesKeywordValidator, object_kind),
        KeywordSpec("definitions", checkers.SchemaMapSyntaxChecker("definitions")),
    ]


def _default_formats() -> dict[str, FormatValidator]:
    formats = {validator.name: validator() for validator in DEFAULT_FORMATS}
    formats["host-name"] = HostnameFormatValidator()
    return formats


@lru_cache(maxsize=1)
def _default_bundle() -> ValidatorBundle:
    return ValidatorBundle(_default_keywords(), _default_formats())


def default_bundle() -> ValidatorBundle:
    """Return a fresh copy of the default bundle, safe to extend."""

    return _default_bundle().copy()
