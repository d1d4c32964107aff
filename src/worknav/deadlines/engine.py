"""Deterministic tribunal deadline computation engine."""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from worknav.case.validation import parse_date
from worknav.core.types import AcasStatus, UrgencyLevel
from worknav.deadlines.models import DeadlineResult, DeadlineRules
from worknav.i18n.engine import I18nEngine

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "deadline_rules.yml"


def add_months(start: date, months: int) -> date:
    """Add calendar months, clamping the day to the end of the target month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


class DeadlineEngine:
    """Computes the employment tribunal filing deadline for a case.

    The base limitation period is three calendar months less one day from
    the incident. Time spent in ACAS Early Conciliation extends it, up to
    the configured cap. The engine never raises on bad dates: anything it
    cannot parse yields an unknown deadline.
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        rules: DeadlineRules | None = None,
        i18n: I18nEngine | None = None,
    ) -> None:
        self._config_path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH
        self._rules = rules if rules is not None else self._load_config()
        self._i18n = i18n if i18n is not None else I18nEngine()

    def _load_config(self) -> DeadlineRules:
        if not self._config_path.exists():
            logger.debug("No deadline rules at %s, using defaults", self._config_path)
            return DeadlineRules()

        with open(self._config_path) as fh:
            raw = yaml.safe_load(fh) or {}
        try:
            return DeadlineRules.model_validate(raw)
        except ValidationError as exc:
            raise ValueError(f"Invalid deadline rules in {self._config_path}: {exc}") from exc

    @property
    def rules(self) -> DeadlineRules:
        return self._rules

    def compute(
        self,
        incident_date: Any,
        acas_status: AcasStatus | str | None = AcasStatus.NOT_STARTED,
        acas_start_date: Any = None,
        *,
        today: date | None = None,
        locale: str | None = None,
    ) -> DeadlineResult:
        incident = parse_date(incident_date)
        if incident is None:
            return DeadlineResult()

        try:
            deadline = add_months(incident, self._rules.limitation_months) - timedelta(days=1)
        except (OverflowError, ValueError):
            return DeadlineResult()

        extension = 0
        if _coerce_status(acas_status) == AcasStatus.STARTED:
            acas_start = parse_date(acas_start_date)
            # An ACAS start before the incident is left unflagged; it just earns no extension
            if acas_start is not None and acas_start >= incident:
                extension = min(max((acas_start - incident).days, 0),
                                self._rules.acas_extension_cap_days)
        if extension > 0:
            try:
                deadline += timedelta(days=extension)
            except OverflowError:
                return DeadlineResult()

        raw_days_left = (deadline - (today or date.today())).days

        return DeadlineResult(
            deadline=deadline,
            days_left=max(0, raw_days_left),
            urgency=self.urgency_for(raw_days_left),
            formatted_deadline=self._i18n.format_date(deadline, locale),
            includes_acas_extension=extension > 0,
            acas_extension_days=extension,
        )

    def urgency_for(self, days_left: int) -> UrgencyLevel:
        """Tier a raw (unclamped) days-left value; overdue counts as urgent."""
        thresholds = self._rules.urgency
        if days_left <= thresholds.urgent_max_days:
            return UrgencyLevel.URGENT
        if days_left <= thresholds.warning_max_days:
            return UrgencyLevel.WARNING
        return UrgencyLevel.OK

    def urgency_label(self, urgency: UrgencyLevel, locale: str | None = None) -> str:
        return self._i18n.t(f"deadline.status.{urgency.value}", locale)

    @staticmethod
    def next_action(acas_status: AcasStatus | str | None) -> str:
        """i18n key for what the claimant should do next about ACAS."""
        if _coerce_status(acas_status) == AcasStatus.STARTED:
            return "deadline.next_action.acas_started"
        return "deadline.next_action.start_acas"


def _coerce_status(value: AcasStatus | str | None) -> AcasStatus:
    if value is None:
        return AcasStatus.NOT_STARTED
    try:
        return AcasStatus(value)
    except (TypeError, ValueError):
        return AcasStatus.NOT_STARTED


_default_engine: DeadlineEngine | None = None


def compute_deadline(
    incident_date: Any,
    acas_status: AcasStatus | str | None = AcasStatus.NOT_STARTED,
    acas_start_date: Any = None,
    *,
    today: date | None = None,
    locale: str | None = None,
) -> DeadlineResult:
    """Compute a deadline with the default rules and bundled translations."""
    global _default_engine
    if _default_engine is None:
        _default_engine = DeadlineEngine()
    return _default_engine.compute(
        incident_date, acas_status, acas_start_date, today=today, locale=locale,
    )
