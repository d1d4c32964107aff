"""Models for the tribunal journey stepper."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from worknav.case.models import StepProgress
from worknav.case.validation import ValidationResult
from worknav.core.types import JourneyStepKey


class StepStatus(str, Enum):
    """Derived display status of a journey step. Never persisted."""

    LOCKED = "locked"
    CURRENT = "current"
    COMPLETED = "completed"


class ChecklistItem(BaseModel):
    """One sub-task shown under a journey step."""

    id: str
    label_key: str
    help_prompt: str | None = None
    external_link: str | None = None
    external_link_label: str | None = None


class StepDefinition(BaseModel):
    """Static definition of a journey step."""

    key: JourneyStepKey
    title_key: str
    mandatory: bool = False
    requires_certificate: bool = False
    certificate_validator: str | None = None
    checklist: list[ChecklistItem] = Field(default_factory=list)

    @property
    def has_checklist(self) -> bool:
        return bool(self.checklist)


class StepView(BaseModel):
    """A step as the stepper renders it."""

    index: int
    key: JourneyStepKey
    title_key: str
    mandatory: bool
    requires_certificate: bool
    has_checklist: bool
    status: StepStatus
    can_mark_complete: bool
    progress: StepProgress | None = None


class ChecklistProgress(BaseModel):
    step_key: JourneyStepKey
    completed: int
    total: int
    percent: int


class JourneySummary(BaseModel):
    """Overall journey progress for the sidebar."""

    completed_steps: int
    total_steps: int
    percent: int
    current_step_index: int
    current_step: JourneyStepKey


class JourneyUpdate(BaseModel):
    """Outcome of a step transition.

    On rejection ``progress`` is the unchanged input and ``validation``
    carries the field-level errors.
    """

    progress: dict[JourneyStepKey, StepProgress]
    validation: ValidationResult = Field(default_factory=ValidationResult.ok)

    @property
    def applied(self) -> bool:
        return self.validation.valid
