"""Deadline data models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from worknav.core.types import UrgencyLevel


class UrgencyThresholds(BaseModel):
    """Upper bounds (inclusive, in days left) for each urgency tier."""

    urgent_max_days: int = 7
    warning_max_days: int = 21


class DeadlineRules(BaseModel):
    """Statutory rules used to compute the tribunal filing deadline."""

    limitation_months: int = 3
    acas_extension_cap_days: int = 30
    urgency: UrgencyThresholds = Field(default_factory=UrgencyThresholds)


class DeadlineResult(BaseModel):
    """Computed filing deadline, ready for rendering.

    An unknown deadline reports ``warning`` urgency, never ``ok``.
    """

    deadline: date | None = None
    days_left: int | None = None
    urgency: UrgencyLevel = UrgencyLevel.WARNING
    formatted_deadline: str | None = None
    includes_acas_extension: bool = False
    acas_extension_days: int = 0

    @property
    def known(self) -> bool:
        return self.deadline is not None
