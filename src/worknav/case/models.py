"""Case record models: the single persisted aggregate for a claimant."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from worknav.core.types import AcasStatus, DocumentType, JourneyStepKey, Scenario


class StepProgress(BaseModel):
    """Progress recorded against one journey step.

    ``checklist_items`` is tracked independently of ``completed``.
    """

    completed: bool = False
    completed_at: datetime | None = None
    certificate_number: str | None = None
    checklist_items: set[str] = Field(default_factory=set)

    @field_serializer("checklist_items")
    def _serialize_checklist(self, items: set[str]) -> list[str]:
        return sorted(items)


class LegalAdvisorContact(BaseModel):
    """Contact details for the claimant's legal advisor, if any."""

    name: str | None = None
    phone: str | None = None
    email: str | None = None


class DocumentDraft(BaseModel):
    """A document being drafted. Opaque to the journey and deadline engines."""

    type: DocumentType
    sections: dict[str, str] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed: bool = False


class AccessibilitySettings(BaseModel):
    """Display and speech preferences kept across case resets."""

    text_size: str = "medium"
    high_contrast: bool = False
    reduce_motion: bool = False
    dyslexia_font: bool = False
    colorblind_mode: bool = False
    colorblind_type: str = "none"
    speech_rate: float = 1.0
    auto_read_messages: bool = False


class CaseRecord(BaseModel):
    """Canonical state for one claimant session."""

    scenario: Scenario | None = None
    incident_date: date | None = None
    incident_date_unknown: bool = False
    acas_status: AcasStatus = AcasStatus.NOT_STARTED
    acas_start_date: date | None = None
    journey_progress: dict[JourneyStepKey, StepProgress] = Field(default_factory=dict)
    document_drafts: dict[DocumentType, DocumentDraft] = Field(default_factory=dict)
    legal_advisor: LegalAdvisorContact | None = None

    language: str = "en"
    accessibility: AccessibilitySettings = Field(default_factory=AccessibilitySettings)
    intake_completed: bool = False
    current_intake_step: int = 0

    @field_validator("acas_status", mode="before")
    @classmethod
    def _default_acas_status(cls, value: Any) -> Any:
        # Older records stored null when the intake question was skipped
        return AcasStatus.NOT_STARTED if value is None else value


def reset_case(record: CaseRecord) -> CaseRecord:
    """Return a fresh record, keeping only language and accessibility preferences."""
    return CaseRecord(
        language=record.language,
        accessibility=record.accessibility.model_copy(),
    )
