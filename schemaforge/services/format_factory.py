"""Format compiler: format name + instance -> format validator."""

from __future__ import annotations

from typing import Any

import structlog

from ..bundle import ValidatorBundle
from ..domain.context import ValidationContext
from ..domain.node import classify
from ..validators.base import AlwaysFalseValidator, AlwaysTrueValidator, Validator

logger = structlog.get_logger(__name__)


class FormatFactory:
    """Look up format validators registered in a bundle."""

    def __init__(self, bundle: ValidatorBundle) -> None:
        self._bundle = bundle

    def get_format_validator(
        self, context: ValidationContext, fmt: str, instance: Any
    ) -> Validator:
        validator = self._bundle.format(fmt)
        if validator is None:
            logger.debug("unknown format", format=fmt, schema_path=context.schema_path)
            report = context.failure(f"no validator for format {fmt!r}", keyword="format")
            return AlwaysFalseValidator(report)
        if classify(instance) not in validator.kinds:
            return AlwaysTrueValidator()
        return validator
