"""Translation bundles loaded from YAML with dot-notation key lookup."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_BUNDLES_DIR = Path(__file__).resolve().parents[3] / "config" / "i18n"

_ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class I18nEngine:
    """Internationalization engine.

    Loads YAML translation bundles from a directory (one file per locale).
    Supports dot-notation key lookup with fallback to default locale.
    The locale is always passed in by the caller; the engine keeps no
    notion of a "current" language.
    """

    def __init__(
        self,
        bundles_dir: str | Path | None = None,
        default_locale: str = "en",
    ) -> None:
        self._bundles_dir = Path(bundles_dir) if bundles_dir else _DEFAULT_BUNDLES_DIR
        self._default_locale = default_locale
        self._bundles: dict[str, dict[str, Any]] = {}
        self._load_bundles()

    def _load_bundles(self) -> None:
        if not self._bundles_dir.exists():
            return
        for path in sorted(self._bundles_dir.glob("*.yml")):
            locale = path.stem
            with open(path, encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            self._bundles[locale] = data

    @property
    def locales(self) -> list[str]:
        return sorted(self._bundles.keys())

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def t(self, key: str, locale: str | None = None, **kwargs: Any) -> str:
        """Translate a key using dot-notation lookup.

        Falls back to default locale if key not found in requested locale.
        Falls back to the key itself if not found anywhere.

        Args:
            key: Dot-separated path like "deadline.status.urgent".
            locale: Target locale. Defaults to default_locale.
            **kwargs: Interpolation variables.
        """
        locale = locale or self._default_locale
        value = self._resolve(key, locale)
        if value is None and locale != self._default_locale:
            value = self._resolve(key, self._default_locale)
        if value is None:
            return key

        if kwargs:
            try:
                return value.format(**kwargs)
            except (KeyError, IndexError):
                return value
        return value

    def format_date(self, value: date, locale: str | None = None) -> str:
        """Render a date as "D Month YYYY" using the locale's month names."""
        month = self.t(f"months.{value.month}", locale)
        if month == f"months.{value.month}":
            month = _ENGLISH_MONTHS[value.month - 1]
        return f"{value.day} {month} {value.year}"

    def _resolve(self, key: str, locale: str) -> str | None:
        bundle = self._bundles.get(locale)
        if bundle is None:
            return None

        current: Any = bundle
        for part in key.split("."):
            if isinstance(current, dict):
                value = current.get(part)
                # YAML parses bare numeric keys such as month numbers as int
                if value is None and part.isdigit():
                    value = current.get(int(part))
                current = value
            else:
                return None
            if current is None:
                return None

        return str(current)
