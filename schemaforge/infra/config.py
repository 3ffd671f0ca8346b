"""Configuration loading for schemaforge."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.context import DEFAULT_MAX_DEPTH
from ..domain.features import ValidationFeature


class Settings(BaseSettings):
    """Runtime configuration derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMAFORGE_",
        env_file=".env",
        extra="ignore",
    )

    skip_schema_check: bool = Field(
        False,
        description="Treat every schema as syntactically valid and never check it",
    )
    fail_fast: bool = Field(
        False,
        description="Abort on the first violation instead of collecting a full report",
    )
    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=1,
        description="Maximum number of nested schema descents in one validation run",
    )
    log_level: str = Field("INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field("json", description="Log renderer")

    def features(self) -> frozenset[ValidationFeature]:
        """Validation features enabled by this configuration."""

        enabled = set()
        if self.skip_schema_check:
            enabled.add(ValidationFeature.SKIP_SCHEMACHECK)
        if self.fail_fast:
            enabled.add(ValidationFeature.FAIL_FAST)
        return frozenset(enabled)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()  # type: ignore[call-arg]
