"""Core type definitions shared across all Work Rights Navigator modules."""

from __future__ import annotations

from enum import StrEnum


class Scenario(StrEnum):
    """What happened at work, as chosen on the first intake screen."""

    FIRED = "fired"
    HOURS_CUT = "hours-cut"
    JOB_CHANGED = "job-changed"
    BULLYING = "bullying"
    ADJUSTMENTS = "adjustments"
    NOT_SURE = "not-sure"


class AcasStatus(StrEnum):
    """Whether ACAS Early Conciliation has been started."""

    NOT_STARTED = "not-started"
    STARTED = "started"
    UNKNOWN = "unknown"


class JourneyStepKey(StrEnum):
    """The seven tribunal process stages, in journey order."""

    INCIDENT = "incident"
    ACAS = "acas"
    ET1 = "et1"
    ET3 = "et3"
    CASE_MANAGEMENT = "case-management"
    WITNESS = "witness"
    HEARING = "hearing"


class UrgencyLevel(StrEnum):
    """How close the filing deadline is."""

    OK = "ok"
    WARNING = "warning"
    URGENT = "urgent"


class DocumentType(StrEnum):
    """Tribunal documents the claimant can draft."""

    WITNESS_STATEMENT = "witness-statement"
    SCHEDULE_OF_LOSS = "schedule-of-loss"
    CHRONOLOGY = "chronology"
    LIST_OF_ISSUES = "list-of-issues"
