"""Shared test fixtures for schemaforge tests."""

from __future__ import annotations

from typing import Any

import pytest

from schemaforge.bundle import ValidatorBundle, default_bundle
from schemaforge.domain.context import ValidationContext
from schemaforge.domain.features import ValidationFeature
from schemaforge.infra.config import Settings
from schemaforge.services.factory import ValidatorFactory
from schemaforge.services.keyword_factory import KeywordFactory
from schemaforge.services.syntax_factory import SyntaxFactory


class CountingKeywordFactory:
    """Keyword compiler stub recording every compilation request.

    Delegates to the real ``KeywordFactory``, satisfying KeywordCompilerPort.
    """

    def __init__(self, bundle: ValidatorBundle | None = None) -> None:
        self._delegate = KeywordFactory(bundle or default_bundle())
        self.calls: list[tuple[Any, Any]] = []

    def get_validators(self, context, instance):
        self.calls.append((context.schema, instance))
        return self._delegate.get_validators(context, instance)


class CountingSyntaxFactory:
    """Syntax compiler stub recording every schema it builds a checker for."""

    def __init__(self, bundle: ValidatorBundle | None = None) -> None:
        self._delegate = SyntaxFactory(bundle or default_bundle())
        self.calls: list[Any] = []

    def get_validator(self, context):
        self.calls.append(context.schema)
        return self._delegate.get_validator(context)


class StaticKeywordFactory:
    """Keyword compiler stub returning a fixed list of validators."""

    def __init__(self, validators) -> None:
        self.validators = list(validators)
        self.calls = 0

    def get_validators(self, context, instance):
        self.calls += 1
        return list(self.validators)


@pytest.fixture
def counting_keywords() -> CountingKeywordFactory:
    return CountingKeywordFactory()


@pytest.fixture
def counting_syntax() -> CountingSyntaxFactory:
    return CountingSyntaxFactory()


@pytest.fixture
def factory(counting_keywords, counting_syntax) -> ValidatorFactory:
    """Factory over the default bundle with counting compilers."""
    return ValidatorFactory(
        keyword_factory=counting_keywords,
        syntax_factory=counting_syntax,
    )


@pytest.fixture
def test_settings() -> Settings:
    """Settings instance independent from the environment."""
    return Settings(skip_schema_check=False, fail_fast=False, max_depth=64)


def _make_context(
    factory: ValidatorFactory,
    schema: Any,
    *,
    fail_fast: bool = False,
    max_depth: int = 64,
) -> ValidationContext:
    """Factory for a root ValidationContext."""
    features = frozenset({ValidationFeature.FAIL_FAST}) if fail_fast else frozenset()
    return ValidationContext(
        factory=factory,
        schema=schema,
        features=features,
        max_depth=max_depth,
    )


@pytest.fixture
def make_context():
    """Build root contexts: make_context(factory, schema, fail_fast=False)."""
    return _make_context


@pytest.fixture
def static_keywords():
    """Build keyword compiler stubs returning fixed validators."""
    return StaticKeywordFactory
