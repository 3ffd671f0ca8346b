"""Validator factory: syntax checking once, compiling and caching validators.

The factory owns two pieces of long-lived state, both keyed by schema content
rather than identity:

- the set of schemas which already passed syntax checking;
- the cache of compiled instance validators, per (node type, schema).

Both are created with the factory and live as long as it does. A factory is
meant to be shared by every validation run over a stable set of schemas.
"""

from __future__ import annotations

from typing import Any

import structlog

from ..bundle import ValidatorBundle, default_bundle
from ..domain.context import ValidationContext
from ..domain.node import NodeType, classify
from ..domain.report import ValidationReport
from ..infra.cache import ValidatedSchemaSet, ValidatorCache
from ..port.cache import CachePort
from ..port.compiler import FormatCompilerPort, KeywordCompilerPort, SyntaxCompilerPort
from ..validators.base import AlwaysTrueValidator, MatchAllValidator, Validator
from ..validators.container import ArrayValidator, ObjectValidator
from .format_factory import FormatFactory
from .keyword_factory import KeywordFactory
from .syntax_factory import SyntaxFactory

logger = structlog.get_logger(__name__)


class ValidatorFactory:
    """Entry point of the engine for schema and instance validation.

    Args:
        bundle: Keyword and format registrations; the default bundle if omitted.
        skip_syntax: Treat every schema as already syntax-checked.
        keyword_factory: Keyword compiler, built from ``bundle`` if omitted.
        syntax_factory: Syntax compiler, built from ``bundle`` if omitted.
        format_factory: Format compiler, built from ``bundle`` if omitted.
        cache: Validator cache; a fresh ``ValidatorCache`` if omitted.
    """

    def __init__(
        self,
        bundle: ValidatorBundle | None = None,
        skip_syntax: bool = False,
        *,
        keyword_factory: KeywordCompilerPort | None = None,
        syntax_factory: SyntaxCompilerPort | None = None,
        format_factory: FormatCompilerPort | None = None,
        cache: CachePort | None = None,
    ) -> None:
        bundle = bundle or default_bundle()
        self.skip_syntax = skip_syntax
        self._keyword_factory = keyword_factory or KeywordFactory(bundle)
        self._syntax_factory = syntax_factory or SyntaxFactory(bundle)
        self._format_factory = format_factory or FormatFactory(bundle)
        self._cache = cache if cache is not None else ValidatorCache()
        self._validated = ValidatedSchemaSet()

    @property
    def cache(self) -> CachePort:
        return self._cache

    def validate_schema(self, context: ValidationContext) -> ValidationReport:
        """Syntax-check ``context.schema`` and remember it when valid.

        Raises:
            ValidationFailureError: on the first violation in fail-fast mode.
        """
        schema = context.schema
        validator = self._syntax_factory.get_validator(context)
        report = validator.validate(context, schema)

        if report.success:
            self._validated.add(schema)
            logger.debug("schema validated", schema_path=context.schema_path)
        else:
            logger.debug(
                "invalid schema",
                schema_path=context.schema_path,
                violations=len(report.messages),
            )
        return report

    def is_validated(self, schema: Any) -> bool:
        return self.skip_syntax or schema in self._validated

    def get_instance_validator(self, context: ValidationContext, instance: Any) -> Validator:
        """Return the (possibly cached) validator for ``instance``'s kind.

        Compilation only depends on the schema content and the kind of the
        instance, never on the instance value itself.
        """
        schema = context.schema
        kind = classify(instance)

        cached = self._cache.get(kind, schema)
        if cached is not None:
            return cached

        validators = self._keyword_factory.get_validators(context, instance)
        if len(validators) == 0:
            validator: Validator = AlwaysTrueValidator()
        elif len(validators) == 1:
            validator = validators[0]
        else:
            validator = MatchAllValidator(validators)

        if kind is NodeType.ARRAY:
            compiled: Validator = ArrayValidator(schema, validator)
        elif kind is NodeType.OBJECT:
            compiled = ObjectValidator(schema, validator)
        else:
            compiled = validator

        self._cache.put(kind, schema, compiled)
        logger.debug(
            "instance validator compiled",
            schema_path=context.schema_path,
            kind=kind.value,
            keywords=len(validators),
        )
        return compiled

    def get_format_validator(
        self, context: ValidationContext, fmt: str, instance: Any
    ) -> Validator:
        """Return the validator for format ``fmt``.

        Raises:
            ValidationFailureError: in fail-fast mode when ``fmt`` is unknown.
        """
        return self._format_factory.get_format_validator(context, fmt, instance)
