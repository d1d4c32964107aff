"""Case summary renderer for plain-text and JSON export."""

from __future__ import annotations

from datetime import date, datetime, timezone

from worknav.case.models import CaseRecord
from worknav.core.types import AcasStatus, DocumentType, Scenario
from worknav.deadlines.engine import DeadlineEngine
from worknav.i18n.engine import I18nEngine
from worknav.journey.engine import JourneyEngine

RULE = "=" * 60
SECTION_RULE = "-" * 60

_SCENARIO_LABELS: dict[Scenario, str] = {
    Scenario.FIRED: "I was fired or dismissed",
    Scenario.HOURS_CUT: "My hours or pay were cut",
    Scenario.JOB_CHANGED: "My job was changed without agreement",
    Scenario.BULLYING: "I was bullied or harassed",
    Scenario.ADJUSTMENTS: "I was refused reasonable adjustments",
    Scenario.NOT_SURE: "I am not sure",
}

_ACAS_LABELS: dict[AcasStatus, str] = {
    AcasStatus.NOT_STARTED: "Not started",
    AcasStatus.STARTED: "Started",
    AcasStatus.UNKNOWN: "Unknown",
}

_DOCUMENT_TITLES: dict[DocumentType, str] = {
    DocumentType.WITNESS_STATEMENT: "Witness statement",
    DocumentType.SCHEDULE_OF_LOSS: "Schedule of loss",
    DocumentType.CHRONOLOGY: "Chronology",
    DocumentType.LIST_OF_ISSUES: "List of issues",
}


class CaseSummaryRenderer:
    """Renders a case record as a human-readable summary for the claimant or an advisor."""

    def __init__(
        self,
        journey_engine: JourneyEngine | None = None,
        deadline_engine: DeadlineEngine | None = None,
        i18n: I18nEngine | None = None,
    ) -> None:
        self._i18n = i18n or I18nEngine()
        self._journey = journey_engine or JourneyEngine()
        self._deadlines = deadline_engine or DeadlineEngine(i18n=self._i18n)

    def render_json(self, record: CaseRecord) -> str:
        return record.model_dump_json(indent=2)

    def render_text(
        self,
        record: CaseRecord,
        locale: str | None = None,
        generated_at: datetime | None = None,
        today: date | None = None,
    ) -> str:
        generated_at = generated_at or datetime.now(timezone.utc)
        lines = [
            RULE,
            "WORK RIGHTS NAVIGATOR - CASE DETAILS",
            RULE,
            f"Generated: {self._i18n.format_date(generated_at.date(), locale)}, "
            f"{generated_at:%H:%M}",
            "",
        ]

        lines += self._section("BASIC INFORMATION")
        if record.scenario is not None:
            lines.append(f"Situation: {_SCENARIO_LABELS[record.scenario]}")
        else:
            lines.append("Situation: Not specified")

        if record.incident_date is not None:
            lines.append(f"Incident Date: {self._format(record.incident_date, locale)}")
        elif record.incident_date_unknown:
            lines.append("Incident Date: Unknown")
        else:
            lines.append("Incident Date: Not provided")

        deadline = self._deadlines.compute(
            record.incident_date, record.acas_status, record.acas_start_date,
            today=today, locale=locale,
        )
        if deadline.known:
            note = " (includes ACAS extension)" if deadline.includes_acas_extension else ""
            lines.append(f"Tribunal Deadline: {deadline.formatted_deadline}{note}")
            lines.append(f"Days Left: {deadline.days_left}")

        lines.append("")
        lines += self._section("ACAS EARLY CONCILIATION")
        lines.append(f"Status: {_ACAS_LABELS[record.acas_status]}")
        if record.acas_start_date is not None:
            lines.append(f"Start Date: {self._format(record.acas_start_date, locale)}")

        lines.append("")
        lines += self._section("JOURNEY PROGRESS")
        for step in self._journey.steps:
            title = self._i18n.t(step.title_key, locale)
            progress = record.journey_progress.get(step.key)
            if progress is None:
                lines.append(f"{title}: Not started")
                continue
            lines.append(f"{title}: {'Completed' if progress.completed else 'In Progress'}")
            if progress.completed_at is not None:
                lines.append(f"  Completed: {self._format(progress.completed_at.date(), locale)}")
            if progress.certificate_number:
                lines.append(f"  Reference Number: {progress.certificate_number}")
            if step.has_checklist:
                checklist = self._journey.checklist_progress(record.journey_progress, step.key)
                lines.append(f"  Checklist: {checklist.completed}/{checklist.total}")

        advisor = record.legal_advisor
        if advisor is not None and (advisor.name or advisor.phone or advisor.email):
            lines.append("")
            lines += self._section("LEGAL ADVISOR CONTACT")
            if advisor.name:
                lines.append(f"Name: {advisor.name}")
            if advisor.phone:
                lines.append(f"Phone: {advisor.phone}")
            if advisor.email:
                lines.append(f"Email: {advisor.email}")

        lines.append("")
        lines += self._section("DOCUMENTS PREPARED")
        if not record.document_drafts:
            lines.append("No documents have been prepared yet.")
        for doc_type in DocumentType:
            draft = record.document_drafts.get(doc_type)
            if draft is None:
                continue
            lines += ["", _DOCUMENT_TITLES[doc_type].upper(), "-" * 40]
            lines.append(f"Status: {'Completed' if draft.completed else 'Draft'}")
            lines.append(f"Created: {self._format(draft.created_at.date(), locale)}")
            lines.append(f"Last Updated: {self._format(draft.updated_at.date(), locale)}")
            for section_id, content in draft.sections.items():
                if not content:
                    continue
                lines.append("")
                lines.append(f"{section_id.replace('_', ' ').title()}:")
                lines += [f"  {line}" for line in content.splitlines()]

        lines += ["", RULE, "END OF CASE DETAILS", RULE]
        return "\n".join(lines) + "\n"

    def _section(self, title: str) -> list[str]:
        return [title, SECTION_RULE]

    def _format(self, value: date, locale: str | None) -> str:
        return self._i18n.format_date(value, locale)
