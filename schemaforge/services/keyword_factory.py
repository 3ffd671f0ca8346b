"""Keyword compiler: schema + instance kind -> keyword validators."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from ..bundle import ValidatorBundle
from ..domain.context import ValidationContext
from ..domain.node import REF_KEYWORD, classify
from ..validators.base import Validator

logger = structlog.get_logger(__name__)


class KeywordFactory:
    """Build keyword validators from a bundle.

    Validators come out in bundle registration order, which makes the result
    deterministic for a given (schema, kind) pair. A schema holding ``$ref``
    only yields the reference validator.
    """

    def __init__(self, bundle: ValidatorBundle) -> None:
        self._bundle = bundle

    def get_validators(self, context: ValidationContext, instance: Any) -> list[Validator]:
        schema = context.schema
        if not isinstance(schema, Mapping):
            return []

        kind = classify(instance)
        if REF_KEYWORD in schema:
            spec = self._bundle.keyword(REF_KEYWORD)
            if spec is not None and spec.validator is not None and kind in spec.kinds:
                return [spec.validator(schema)]

        validators: list[Validator] = []
        for spec in self._bundle.keywords:
            if spec.validator is None or spec.keyword not in schema:
                continue
            if kind not in spec.kinds:
                continue
            validators.append(spec.validator(schema))

        logger.debug(
            "keyword validators built",
            schema_path=context.schema_path,
            kind=kind.value,
            count=len(validators),
        )
        return validators
