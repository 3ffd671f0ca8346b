"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from schemaforge.domain.features import ValidationFeature
from schemaforge.infra.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SKIP_SCHEMA_CHECK", "FAIL_FAST", "MAX_DEPTH", "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(f"SCHEMAFORGE_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.skip_schema_check is False
        assert settings.fail_fast is False
        assert settings.max_depth == 256
        assert settings.features() == frozenset()

    def test_env_var_loading(self, monkeypatch):
        monkeypatch.setenv("SCHEMAFORGE_FAIL_FAST", "true")
        monkeypatch.setenv("SCHEMAFORGE_SKIP_SCHEMA_CHECK", "1")
        monkeypatch.setenv("SCHEMAFORGE_MAX_DEPTH", "12")
        settings = Settings(_env_file=None)
        assert settings.max_depth == 12
        assert settings.features() == frozenset(
            {ValidationFeature.FAIL_FAST, ValidationFeature.SKIP_SCHEMACHECK}
        )

    def test_max_depth_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_depth=0)

    def test_log_format_is_restricted(self):
        with pytest.raises(ValidationError):
            Settings(log_format="xml")
