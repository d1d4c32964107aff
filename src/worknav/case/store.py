"""Case record persistence: load never fails, save reports failure as a bool."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from worknav.case.models import CaseRecord

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "wrn-case-state"


@runtime_checkable
class CaseRepository(Protocol):
    """Protocol for case record storage."""

    def load(self) -> CaseRecord: ...

    def save(self, record: CaseRecord) -> bool: ...

    def clear(self) -> bool: ...


class InMemoryCaseStore:
    """In-memory store holding serialised case records by storage key.

    Records are kept as JSON so a load always returns an independent copy.
    Suitable for tests and single-instance deployment.
    """

    def __init__(self, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage_key = storage_key
        self._documents: dict[str, str] = {}

    def load(self) -> CaseRecord:
        raw = self._documents.get(self._storage_key)
        if raw is None:
            return CaseRecord()
        return _parse_record(raw, self._storage_key)

    def save(self, record: CaseRecord) -> bool:
        self._documents[self._storage_key] = record.model_dump_json()
        return True

    def clear(self) -> bool:
        self._documents.pop(self._storage_key, None)
        return True


class JsonFileCaseStore:
    """Stores one JSON document per storage key under ``data_dir``."""

    def __init__(self, data_dir: str | Path, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._data_dir = Path(data_dir)
        self._storage_key = storage_key

    @property
    def path(self) -> Path:
        return self._data_dir / f"{self._storage_key}.json"

    def load(self) -> CaseRecord:
        if not self.path.exists():
            return CaseRecord()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read case state from %s: %s", self.path, exc)
            return CaseRecord()
        return _parse_record(raw, self._storage_key)

    def save(self, record: CaseRecord) -> bool:
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(".json.tmp")
            tmp_path.write_text(record.model_dump_json(indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            logger.error("Failed to save case state to %s: %s", self.path, exc)
            return False
        return True

    def clear(self) -> bool:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            logger.error("Failed to clear case state at %s: %s", self.path, exc)
            return False
        return True


def _parse_record(raw: str, storage_key: str) -> CaseRecord:
    try:
        return CaseRecord.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning(
            "Stored case state %r is corrupt, falling back to defaults (%d errors)",
            storage_key, exc.error_count(),
        )
        return CaseRecord()
