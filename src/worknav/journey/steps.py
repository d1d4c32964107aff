"""The fixed, ordered tribunal journey and its step checklists."""

from __future__ import annotations

from worknav.core.types import JourneyStepKey
from worknav.journey.models import ChecklistItem, StepDefinition

ET1_CLAIM_URL = "https://www.gov.uk/employment-tribunals/make-a-claim"

STEP_CHECKLISTS: dict[JourneyStepKey, list[ChecklistItem]] = {
    JourneyStepKey.ET1: [
        ChecklistItem(
            id="et1-acas-cert",
            label_key="checklists.et1.acas_cert",
            help_prompt="Where do I find my ACAS certificate number?",
        ),
        ChecklistItem(id="et1-details", label_key="checklists.et1.personal_details"),
        ChecklistItem(
            id="et1-employer",
            label_key="checklists.et1.employer_details",
            help_prompt="What employer details do I need for ET1?",
        ),
        ChecklistItem(
            id="et1-claim",
            label_key="checklists.et1.claim_details",
            help_prompt="How do I describe my claim on the ET1 form?",
        ),
        ChecklistItem(
            id="et1-submit",
            label_key="checklists.et1.submit",
            external_link=ET1_CLAIM_URL,
            external_link_label="checklists.et1.submit_link",
        ),
    ],
    JourneyStepKey.ET3: [
        ChecklistItem(
            id="et3-received",
            label_key="checklists.et3.received",
            help_prompt="What happens after the employer responds with ET3?",
        ),
        ChecklistItem(
            id="et3-review",
            label_key="checklists.et3.review",
            help_prompt="How do I respond to what my employer said in their ET3?",
        ),
    ],
    JourneyStepKey.CASE_MANAGEMENT: [
        ChecklistItem(
            id="cm-orders",
            label_key="checklists.case-management.read_orders",
            help_prompt="What are case management orders and what do I need to do?",
        ),
        ChecklistItem(id="cm-deadlines", label_key="checklists.case-management.note_deadlines"),
        ChecklistItem(
            id="cm-documents",
            label_key="checklists.case-management.gather_documents",
            help_prompt="What documents do I need to gather for my case?",
        ),
    ],
    JourneyStepKey.WITNESS: [
        ChecklistItem(
            id="wit-statement",
            label_key="checklists.witness.write_statement",
            help_prompt="How do I write a good witness statement?",
        ),
        ChecklistItem(
            id="wit-others",
            label_key="checklists.witness.get_others",
            help_prompt="Can other people write witness statements for my case?",
        ),
        ChecklistItem(
            id="wit-bundle",
            label_key="checklists.witness.prepare_bundle",
            help_prompt="What is a bundle and how do I prepare one?",
        ),
        ChecklistItem(
            id="wit-schedule",
            label_key="checklists.witness.schedule_of_loss",
            help_prompt="What is a schedule of loss and how do I create one?",
        ),
    ],
    JourneyStepKey.HEARING: [
        ChecklistItem(
            id="hr-prepare",
            label_key="checklists.hearing.prepare",
            help_prompt="How do I prepare for my tribunal hearing?",
        ),
        ChecklistItem(id="hr-travel", label_key="checklists.hearing.travel"),
        ChecklistItem(
            id="hr-dress",
            label_key="checklists.hearing.dress",
            help_prompt="What should I wear to a tribunal hearing?",
        ),
        ChecklistItem(id="hr-documents", label_key="checklists.hearing.bring_documents"),
    ],
}


def _step(key: JourneyStepKey, **kwargs) -> StepDefinition:
    return StepDefinition(
        key=key,
        title_key=f"journey.steps.{key.value}",
        checklist=STEP_CHECKLISTS.get(key, []),
        **kwargs,
    )


JOURNEY_STEPS: tuple[StepDefinition, ...] = (
    _step(JourneyStepKey.INCIDENT),
    _step(
        JourneyStepKey.ACAS,
        mandatory=True,
        requires_certificate=True,
        certificate_validator="acas_certificate",
    ),
    _step(JourneyStepKey.ET1, requires_certificate=True, certificate_validator="case_number"),
    _step(JourneyStepKey.ET3),
    _step(JourneyStepKey.CASE_MANAGEMENT),
    _step(JourneyStepKey.WITNESS),
    _step(JourneyStepKey.HEARING),
)
