"""The claimant's case record, its validation and persistence."""

from worknav.case.models import (
    AccessibilitySettings,
    CaseRecord,
    DocumentDraft,
    LegalAdvisorContact,
    StepProgress,
    reset_case,
)
from worknav.case.store import CaseRepository, InMemoryCaseStore, JsonFileCaseStore

__all__ = [
    "AccessibilitySettings",
    "CaseRecord",
    "CaseRepository",
    "DocumentDraft",
    "InMemoryCaseStore",
    "JsonFileCaseStore",
    "LegalAdvisorContact",
    "StepProgress",
    "reset_case",
]
