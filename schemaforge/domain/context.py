"""Validation context threaded through recursive descent."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from .errors import ValidationFailureError
from .features import ValidationFeature
from .node import append_pointer
from .report import ValidationMessage, ValidationReport

if TYPE_CHECKING:
    from ..services.factory import ValidatorFactory


DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Immutable state for one step of a validation run.

    Every descent (into a child instance, a subschema, or a ``$ref`` target)
    yields a new context; a parent context is never modified.
    """

    factory: ValidatorFactory
    schema: Any
    root: Any = None
    features: frozenset[ValidationFeature] = frozenset()
    path: str = ""
    schema_path: str = "#"
    depth: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.root is None:
            object.__setattr__(self, "root", self.schema)

    @property
    def fail_fast(self) -> bool:
        return ValidationFeature.FAIL_FAST in self.features

    def has_feature(self, feature: ValidationFeature) -> bool:
        return feature in self.features

    def relocate(self, *segments: str | int) -> ValidationContext:
        """Context for a child of the current instance node."""
        return replace(self, path=append_pointer(self.path, *segments))

    def with_schema(self, schema: Any, *segments: str | int) -> ValidationContext:
        """Context for a subschema found below the current schema."""
        return replace(
            self,
            schema=schema,
            schema_path=append_pointer(self.schema_path, *segments),
            depth=self.depth + 1,
        )

    def with_ref(self, schema: Any, ref: str) -> ValidationContext:
        """Context for the target of a local reference."""
        return replace(self, schema=schema, schema_path=ref, depth=self.depth + 1)

    def soft(self) -> ValidationContext:
        """Copy of this context that collects failures instead of raising."""
        if not self.fail_fast:
            return self
        return replace(self, features=self.features - {ValidationFeature.FAIL_FAST})

    def failure(self, message: str, keyword: str | None = None) -> ValidationReport:
        """Report a violation at the current location.

        In fail-fast mode the violation is raised as ``ValidationFailureError``.
        """
        entry = ValidationMessage(
            message=message,
            path=self.path,
            schema_path=self.schema_path,
            keyword=keyword,
            schema=self.schema,
        )
        if self.fail_fast:
            raise ValidationFailureError(entry)
        return ValidationReport.failure(entry)

    def validate(self, instance: Any) -> ValidationReport:
        """Validate ``instance`` against the current schema.

        The schema is syntax-checked first unless the factory already knows it
        to be valid; the compiled validator comes from the factory cache.

        On a root context, running out of interpreter stack before
        ``max_depth`` is reached is reported as the same depth violation.
        """
        if self.depth > 0:
            return self._validate(instance)
        try:
            return self._validate(instance)
        except RecursionError:
            return self.failure(self._depth_exceeded())

    def _depth_exceeded(self) -> str:
        return f"maximum validation depth ({self.max_depth}) exceeded"

    def _validate(self, instance: Any) -> ValidationReport:
        if self.depth > self.max_depth:
            return self.failure(self._depth_exceeded())

        factory = self.factory
        if not factory.is_validated(self.schema):
            report = factory.validate_schema(self)
            if not report.success:
                return report

        validator = factory.get_instance_validator(self, instance)
        return validator.validate(self, instance)
