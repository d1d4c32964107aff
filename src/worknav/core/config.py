"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class StorageConfig(BaseSettings):
    """Case record persistence configuration."""

    model_config = {"env_prefix": "WORKNAV_STORAGE_"}

    backend: str = "file"
    data_dir: str = "data/cases"
    storage_key: str = "wrn-case-state"


class DeadlineConfig(BaseSettings):
    """Deadline calculator configuration."""

    model_config = {"env_prefix": "WORKNAV_DEADLINE_"}

    rules_path: str | None = None


class I18nConfig(BaseSettings):
    """Internationalization configuration."""

    model_config = {"env_prefix": "WORKNAV_I18N_"}

    bundles_dir: str | None = None
    default_locale: str = "en"


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "WORKNAV_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    storage: StorageConfig = Field(default_factory=StorageConfig)
    deadline: DeadlineConfig = Field(default_factory=DeadlineConfig)
    i18n: I18nConfig = Field(default_factory=I18nConfig)
