"""Statutory filing deadline calculation.

Computes the employment tribunal deadline from the incident date, with the
ACAS Early Conciliation extension, and tiers it by urgency.
"""

from worknav.deadlines.engine import DeadlineEngine, add_months, compute_deadline
from worknav.deadlines.models import DeadlineResult, DeadlineRules, UrgencyThresholds

__all__ = [
    "DeadlineEngine",
    "DeadlineResult",
    "DeadlineRules",
    "UrgencyThresholds",
    "add_months",
    "compute_deadline",
]
