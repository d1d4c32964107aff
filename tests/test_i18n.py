"""Tests for i18n engine."""

from __future__ import annotations

from datetime import date

import pytest

from worknav.i18n.engine import I18nEngine


@pytest.fixture
def engine():
    return I18nEngine()


@pytest.fixture
def custom_engine(tmp_path):
    import yaml

    en = {
        "greeting": "Hello {name}",
        "nested": {"key": "Nested Value"},
        "only_en": "English Only",
    }
    pl = {
        "greeting": "Cześć {name}",
        "nested": {"key": "Wartość"},
        "months": {3: "marca"},
    }

    bundles_dir = tmp_path / "i18n"
    bundles_dir.mkdir()
    with open(bundles_dir / "en.yml", "w", encoding="utf-8") as fh:
        yaml.dump(en, fh, allow_unicode=True)
    with open(bundles_dir / "pl.yml", "w", encoding="utf-8") as fh:
        yaml.dump(pl, fh, allow_unicode=True)

    return I18nEngine(bundles_dir=bundles_dir)


class TestI18nEngine:
    def test_loads_default_bundles(self, engine):
        assert "en" in engine.locales
        assert "cy" in engine.locales

    def test_default_locale(self, engine):
        assert engine.default_locale == "en"

    def test_nested_key(self, engine):
        assert engine.t("journey.steps.acas", "en") == "ACAS Early Conciliation"

    def test_fallback_to_default_locale(self, engine):
        # journey step titles are not translated into Welsh yet
        assert engine.t("journey.steps.et1", "cy") == "ET1 Form Submission"

    def test_missing_key_returns_key(self, custom_engine):
        assert custom_engine.t("does.not.exist") == "does.not.exist"

    def test_interpolation(self, custom_engine):
        assert custom_engine.t("greeting", "pl", name="Ola") == "Cześć Ola"

    def test_interpolation_missing_variable(self, custom_engine):
        assert custom_engine.t("greeting", "en") == "Hello {name}"

    def test_key_through_leaf_returns_key(self, custom_engine):
        assert custom_engine.t("only_en.deeper") == "only_en.deeper"

    def test_missing_dir(self, tmp_path):
        engine = I18nEngine(bundles_dir=tmp_path / "nope")
        assert engine.locales == []
        assert engine.t("any.key") == "any.key"


class TestFormatDate:
    def test_english(self, engine):
        assert engine.format_date(date(2025, 3, 15)) == "15 March 2025"

    def test_welsh(self, engine):
        assert engine.format_date(date(2025, 3, 15), "cy") == "15 Mawrth 2025"

    def test_no_leading_zero(self, engine):
        assert engine.format_date(date(2025, 4, 9)) == "9 April 2025"

    def test_partial_bundle_falls_back_to_english_months(self, custom_engine):
        assert custom_engine.format_date(date(2025, 3, 1), "pl") == "1 marca 2025"
        assert custom_engine.format_date(date(2025, 4, 1), "pl") == "1 April 2025"
