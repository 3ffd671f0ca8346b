"""Compiler ports: Protocols for keyword, syntax and format registries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.context import ValidationContext
    from ..validators.base import Validator


@runtime_checkable
class KeywordCompilerPort(Protocol):
    """Port producing the keyword validators applicable to an instance."""

    def get_validators(self, context: ValidationContext, instance: Any) -> list[Validator]:
        """Build one validator per applicable keyword of ``context.schema``.

        Args:
            context: Context holding the current schema.
            instance: Instance about to be validated; only its kind matters.

        Returns:
            Validators in a deterministic order for a (schema, kind) pair.
        """
        ...


@runtime_checkable
class SyntaxCompilerPort(Protocol):
    """Port producing the validator checking a schema's own syntax."""

    def get_validator(self, context: ValidationContext) -> Validator:
        """Build a validator to run against ``context.schema`` itself."""
        ...


@runtime_checkable
class FormatCompilerPort(Protocol):
    """Port producing the validator for a named format."""

    def get_format_validator(
        self, context: ValidationContext, fmt: str, instance: Any
    ) -> Validator:
        """Build the validator for ``fmt`` applied to ``instance``.

        Unknown formats are reported through ``context`` (raising in
        fail-fast mode).
        """
        ...
