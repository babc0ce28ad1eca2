from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.policy import DEFAULT_POLICY


class Settings(BaseSettings):
    """Load-time defaults read from ``USES_*`` environment variables or ``.env``."""

    # Matched case-insensitively so ``USES_ON_CIRCULAR_DEPENDENCY`` and
    # ``uses_on_circular_dependency`` are both honoured.
    model_config = SettingsConfigDict(
        env_prefix="USES_", env_file=".env", extra="ignore", case_sensitive=False
    )

    # Validated by UsesConfig so a bad value raises InvalidPolicyValue.
    on_circular_dependency: str = DEFAULT_POLICY.value


@lru_cache()
def get_settings() -> Settings:
    return Settings()
