"""Tests for environment-driven settings."""

from __future__ import annotations

from worknav.core.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.storage.backend == "file"
        assert settings.storage.storage_key == "wrn-case-state"
        assert settings.deadline.rules_path is None
        assert settings.i18n.default_locale == "en"

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WORKNAV_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("WORKNAV_STORAGE_BACKEND", "memory")
        monkeypatch.setenv("WORKNAV_STORAGE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("WORKNAV_I18N_DEFAULT_LOCALE", "cy")

        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.storage.backend == "memory"
        assert settings.storage.data_dir == str(tmp_path)
        assert settings.i18n.default_locale == "cy"
