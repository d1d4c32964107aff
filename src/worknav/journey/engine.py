"""Journey state machine over the fixed tribunal step sequence."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Mapping, Sequence

from worknav.case.models import StepProgress
from worknav.case.validation import VALIDATORS, ValidationResult
from worknav.core.types import JourneyStepKey
from worknav.journey.models import (
    ChecklistProgress,
    JourneySummary,
    JourneyUpdate,
    StepDefinition,
    StepStatus,
    StepView,
)
from worknav.journey.steps import JOURNEY_STEPS

logger = logging.getLogger(__name__)

Progress = Mapping[JourneyStepKey, StepProgress]


class JourneyEngine:
    """Tracks a claimant's advancement through the tribunal journey.

    The step sequence is fixed; progress is a sparse mapping from step key
    to StepProgress where an absent key means "not started". Step status
    (locked / current / completed) is derived from that mapping on every
    call and never stored.

    All operations are pure: they return a new progress mapping and leave
    the one passed in untouched.
    """

    def __init__(self, steps: Sequence[StepDefinition] = JOURNEY_STEPS) -> None:
        if not steps:
            raise ValueError("A journey needs at least one step.")
        self._steps = tuple(steps)
        self._index = {step.key: i for i, step in enumerate(self._steps)}

    @property
    def steps(self) -> tuple[StepDefinition, ...]:
        return self._steps

    def get_step(self, step_key: JourneyStepKey | str) -> StepDefinition:
        """Look up a step definition.

        Raises:
            KeyError: If step_key is not part of the journey.
        """
        return self._steps[self.index_of(step_key)]

    def index_of(self, step_key: JourneyStepKey | str) -> int:
        try:
            return self._index[JourneyStepKey(step_key)]
        except (KeyError, ValueError):
            raise KeyError(f"Unknown journey step: {step_key!r}") from None

    # -- Derived state --

    def get_current_step_index(self, progress: Progress) -> int:
        """Index of the first step not yet completed, or the last index."""
        for i, step in enumerate(self._steps):
            entry = progress.get(step.key)
            if entry is None or not entry.completed:
                return i
        return len(self._steps) - 1

    @staticmethod
    def can_mark_complete(step_index: int, current_step_index: int) -> bool:
        """A step can be completed if it is at most one past the current step."""
        return step_index <= current_step_index + 1

    def step_views(self, progress: Progress) -> list[StepView]:
        current = self.get_current_step_index(progress)
        views = []
        for i, step in enumerate(self._steps):
            entry = progress.get(step.key)
            if entry is not None and entry.completed:
                status = StepStatus.COMPLETED
            elif i == current:
                status = StepStatus.CURRENT
            else:
                status = StepStatus.LOCKED
            views.append(
                StepView(
                    index=i,
                    key=step.key,
                    title_key=step.title_key,
                    mandatory=step.mandatory,
                    requires_certificate=step.requires_certificate,
                    has_checklist=step.has_checklist,
                    status=status,
                    can_mark_complete=self.can_mark_complete(i, current),
                    progress=entry.model_copy(deep=True) if entry is not None else None,
                )
            )
        return views

    def checklist_progress(
        self, progress: Progress, step_key: JourneyStepKey | str
    ) -> ChecklistProgress:
        step = self.get_step(step_key)
        entry = progress.get(step.key)
        checked = entry.checklist_items if entry is not None else set()
        total = len(step.checklist)
        done = sum(1 for item in step.checklist if item.id in checked)
        return ChecklistProgress(
            step_key=step.key,
            completed=done,
            total=total,
            percent=round(done * 100 / total) if total else 0,
        )

    def completion_summary(self, progress: Progress) -> JourneySummary:
        completed = sum(
            1 for step in self._steps
            if step.key in progress and progress[step.key].completed
        )
        current = self.get_current_step_index(progress)
        total = len(self._steps)
        return JourneySummary(
            completed_steps=completed,
            total_steps=total,
            percent=round(completed * 100 / total),
            current_step_index=current,
            current_step=self._steps[current].key,
        )

    # -- Transitions --

    def validate_certificate(
        self, step_key: JourneyStepKey | str, certificate_number: str | None
    ) -> ValidationResult:
        """Check a certificate against the step's validator, if it has one."""
        step = self.get_step(step_key)
        if not step.requires_certificate:
            return ValidationResult.ok()

        err = VALIDATORS[step.certificate_validator or "required"](certificate_number)
        if err:
            return ValidationResult.failed("certificate_number", err)
        return ValidationResult.ok()

    def mark_step_complete(
        self,
        progress: Progress,
        step_key: JourneyStepKey | str,
        certificate_number: str | None = None,
        *,
        now: datetime | None = None,
    ) -> JourneyUpdate:
        """Mark a step complete, recording its certificate number if it needs one.

        Re-marking a completed step updates its certificate and timestamp.
        Rejections come back as a JourneyUpdate carrying the unchanged
        progress and the field errors.

        Raises:
            KeyError: If step_key is not part of the journey.
        """
        step = self.get_step(step_key)
        index = self._index[step.key]

        current = self.get_current_step_index(progress)
        if not self.can_mark_complete(index, current):
            logger.info(
                "Rejected completing step %s: current step is %s",
                step.key.value, self._steps[current].key.value,
            )
            return JourneyUpdate(
                progress=_copy(progress),
                validation=ValidationResult.failed(
                    "step", "Complete the earlier steps before this one."
                ),
            )

        validation = self.validate_certificate(step.key, certificate_number)
        if not validation.valid:
            return JourneyUpdate(progress=_copy(progress), validation=validation)

        updated = _copy(progress)
        existing = updated.get(step.key)
        updated[step.key] = StepProgress(
            completed=True,
            completed_at=now or datetime.now(timezone.utc),
            certificate_number=(
                certificate_number.strip()
                if step.requires_certificate and certificate_number
                else (existing.certificate_number if existing else None)
            ),
            checklist_items=set(existing.checklist_items) if existing else set(),
        )
        logger.info("Step %s marked complete", step.key.value)
        return JourneyUpdate(progress=updated)

    def unmark_step(
        self, progress: Progress, step_key: JourneyStepKey | str
    ) -> dict[JourneyStepKey, StepProgress]:
        """Remove a step's progress entirely, certificate and checklist included."""
        step = self.get_step(step_key)
        updated = _copy(progress)
        if updated.pop(step.key, None) is not None:
            logger.info("Step %s reset", step.key.value)
        return updated

    def toggle_checklist_item(
        self,
        progress: Progress,
        step_key: JourneyStepKey | str,
        item_id: str,
        checked: bool,
    ) -> dict[JourneyStepKey, StepProgress]:
        """Add or remove a checklist item. Leaves ``completed`` alone."""
        step = self.get_step(step_key)
        updated = _copy(progress)
        entry = updated.get(step.key)
        if entry is None:
            if not checked:
                return updated
            entry = updated[step.key] = StepProgress()

        if checked:
            entry.checklist_items.add(item_id)
        else:
            entry.checklist_items.discard(item_id)
        return updated


def _copy(progress: Progress) -> dict[JourneyStepKey, StepProgress]:
    return {key: entry.model_copy(deep=True) for key, entry in progress.items()}
