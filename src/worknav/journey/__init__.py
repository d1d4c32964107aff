"""Tribunal journey stepper.

Provides the fixed step sequence, per-step checklists, and the state machine
that derives the current step and applies completion transitions.
"""

from worknav.journey.engine import JourneyEngine
from worknav.journey.models import (
    ChecklistItem,
    ChecklistProgress,
    JourneySummary,
    JourneyUpdate,
    StepDefinition,
    StepStatus,
    StepView,
)
from worknav.journey.steps import JOURNEY_STEPS, STEP_CHECKLISTS

__all__ = [
    "ChecklistItem",
    "ChecklistProgress",
    "JOURNEY_STEPS",
    "JourneyEngine",
    "JourneySummary",
    "JourneyUpdate",
    "STEP_CHECKLISTS",
    "StepDefinition",
    "StepStatus",
    "StepView",
]
