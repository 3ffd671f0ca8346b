"""Public entry point: validate instances against one schema."""

from __future__ import annotations

from typing import Any, Iterable

import structlog

from ..bundle import ValidatorBundle
from ..domain.context import ValidationContext
from ..domain.features import ValidationFeature
from ..domain.node import resolve_pointer
from ..domain.report import ValidationReport
from ..infra import json
from ..infra.config import Settings, get_settings
from ..infra.logging import get_schema_id, set_schema_id
from .factory import ValidatorFactory

logger = structlog.get_logger(__name__)


class JsonValidator:
    """Validator bound to a schema.

    Several ``JsonValidator`` objects may share one ``ValidatorFactory`` so
    that syntax checks and compiled validators are reused across schemas that
    have subschemas in common. When ``factory`` is given, its own
    ``skip_syntax`` setting wins over ``SKIP_SCHEMACHECK``.

    ``schema_id`` is attached to log events emitted while validating.

    Usage:
        validator = JsonValidator({"type": "object", "required": ["a"]})
        report = validator.validate({"a": 1})
    """

    def __init__(
        self,
        schema: Any,
        *,
        features: Iterable[ValidationFeature] | None = None,
        factory: ValidatorFactory | None = None,
        bundle: ValidatorBundle | None = None,
        settings: Settings | None = None,
        schema_id: str | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.schema = schema
        self.schema_id = schema_id
        self._features = frozenset(features) if features is not None else settings.features()
        self._max_depth = settings.max_depth
        self.factory = factory or ValidatorFactory(
            bundle,
            skip_syntax=ValidationFeature.SKIP_SCHEMACHECK in self._features,
        )

    @classmethod
    def from_json(cls, text: str | bytes, **kwargs: Any) -> JsonValidator:
        """Build a validator from the JSON text of a schema.

        Raises:
            orjson.JSONDecodeError: when ``text`` is not valid JSON.
        """
        return cls(json.loads(text), **kwargs)

    @property
    def features(self) -> frozenset[ValidationFeature]:
        return self._features

    def context(self, pointer: str = "") -> ValidationContext:
        """Build the root context, optionally for the subschema at ``pointer``.

        Raises:
            LookupError: when ``pointer`` does not designate a subschema.
        """
        schema = resolve_pointer(self.schema, pointer) if pointer else self.schema
        return ValidationContext(
            factory=self.factory,
            schema=schema,
            root=self.schema,
            features=self._features,
            schema_path=pointer if pointer.startswith("#") else f"#{pointer}",
            max_depth=self._max_depth,
        )

    def validate_schema(self) -> ValidationReport:
        """Syntax-check the whole schema, whether or not it was checked before.

        Raises:
            ValidationFailureError: on the first violation in fail-fast mode.
        """
        previous = get_schema_id()
        set_schema_id(self.schema_id or previous)
        try:
            return self.factory.validate_schema(self.context())
        finally:
            set_schema_id(previous)

    def validate(self, instance: Any, pointer: str = "") -> ValidationReport:
        """Validate ``instance`` against the schema or one of its subschemas.

        Raises:
            ValidationFailureError: on the first violation in fail-fast mode.
            LookupError: when ``pointer`` does not designate a subschema.
        """
        previous = get_schema_id()
        set_schema_id(self.schema_id or previous)
        try:
            report = self.context(pointer).validate(instance)
            if not report.success:
                logger.debug(
                    "instance rejected",
                    schema_path=pointer or "#",
                    violations=len(report.messages),
                )
            return report
        finally:
            set_schema_id(previous)

    def validate_json(self, text: str | bytes, pointer: str = "") -> ValidationReport:
        """Parse ``text`` and validate the resulting document.

        Raises:
            orjson.JSONDecodeError: when ``text`` is not valid JSON.
        """
        return self.validate(json.loads(text), pointer)
