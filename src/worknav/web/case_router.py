"""FastAPI router for the case record, deadline, journey and export endpoints.

Handlers are plain functions so FastAPI runs the blocking store calls in its
threadpool.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel, Field, ValidationError

from worknav.case.models import CaseRecord, LegalAdvisorContact, reset_case
from worknav.case.validation import (
    INTAKE_RULES,
    LEGAL_ADVISOR_RULES,
    ValidationResult,
    validate_fields,
)
from worknav.core.types import AcasStatus, JourneyStepKey, Scenario

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Request/Response models ---


class CaseUpdateRequest(BaseModel):
    """Partial update of the intake fields. Only fields sent are applied."""

    scenario: Scenario | None = None
    incident_date: str | None = None
    incident_date_unknown: bool | None = None
    acas_status: AcasStatus | None = None
    acas_start_date: str | None = None
    legal_advisor: LegalAdvisorContact | None = None
    language: str | None = None
    intake_completed: bool | None = None
    current_intake_step: int | None = None


class CompleteStepRequest(BaseModel):
    certificate_number: str | None = None


class ChecklistToggleRequest(BaseModel):
    checked: bool = True


class JourneyResponse(BaseModel):
    current_step_index: int
    current_step: str
    completed_steps: int
    total_steps: int
    percent: int
    steps: list[dict[str, Any]] = Field(default_factory=list)


# --- Helpers ---


def _load(request: Request) -> CaseRecord:
    return request.app.state.case_store.load()


def _save(request: Request, record: CaseRecord) -> None:
    if not request.app.state.case_store.save(record):
        raise HTTPException(status_code=503, detail="Could not save case state")


def _reject(result: ValidationResult) -> HTTPException:
    return HTTPException(status_code=422, detail={"errors": result.errors})


def _journey_response(request: Request, record: CaseRecord) -> JourneyResponse:
    engine = request.app.state.journey_engine
    summary = engine.completion_summary(record.journey_progress)
    steps = []
    for view in engine.step_views(record.journey_progress):
        step = view.model_dump(mode="json")
        if view.has_checklist:
            step["checklist"] = engine.checklist_progress(
                record.journey_progress, view.key
            ).model_dump(mode="json")
        steps.append(step)
    return JourneyResponse(
        current_step_index=summary.current_step_index,
        current_step=summary.current_step.value,
        completed_steps=summary.completed_steps,
        total_steps=summary.total_steps,
        percent=summary.percent,
        steps=steps,
    )


def _step_key(request: Request, step_key: str) -> JourneyStepKey:
    try:
        return request.app.state.journey_engine.get_step(step_key).key
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


# --- Case endpoints ---


@router.get("/api/case")
def get_case(request: Request) -> dict[str, Any]:
    return _load(request).model_dump(mode="json")


@router.patch("/api/case")
def update_case(body: CaseUpdateRequest, request: Request) -> dict[str, Any]:
    updates = body.model_dump(exclude_unset=True)

    result = validate_fields(updates, INTAKE_RULES)
    if body.legal_advisor is not None:
        advisor_result = validate_fields(body.legal_advisor.model_dump(), LEGAL_ADVISOR_RULES)
        result.errors.update(
            {f"legal_advisor.{k}": v for k, v in advisor_result.errors.items()}
        )
        result.valid = result.valid and advisor_result.valid
    if not result.valid:
        raise _reject(result)

    try:
        record = CaseRecord.model_validate({**_load(request).model_dump(), **updates})
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    _save(request, record)
    return record.model_dump(mode="json")


@router.post("/api/case/reset")
def reset(request: Request) -> dict[str, Any]:
    record = reset_case(_load(request))
    _save(request, record)
    logger.info("Case reset")
    return record.model_dump(mode="json")


@router.get("/api/case/deadline")
def get_deadline(
    request: Request, locale: str | None = None, today: date | None = None
) -> dict[str, Any]:
    engine = request.app.state.deadline_engine
    record = _load(request)
    result = engine.compute(
        record.incident_date, record.acas_status, record.acas_start_date,
        today=today, locale=locale or record.language,
    )
    data = result.model_dump(mode="json")
    data["urgency_label"] = engine.urgency_label(result.urgency, locale or record.language)
    data["next_action"] = engine.next_action(record.acas_status)
    return data


# --- Journey endpoints ---


@router.get("/api/case/journey")
def get_journey(request: Request) -> JourneyResponse:
    return _journey_response(request, _load(request))


@router.post("/api/case/journey/{step_key}/complete")
def complete_step(
    step_key: str, request: Request, body: CompleteStepRequest | None = None
) -> JourneyResponse:
    key = _step_key(request, step_key)
    engine = request.app.state.journey_engine
    record = _load(request)

    update = engine.mark_step_complete(
        record.journey_progress, key, body.certificate_number if body else None
    )
    if not update.applied:
        raise _reject(update.validation)

    record.journey_progress = update.progress
    _save(request, record)
    return _journey_response(request, record)


@router.delete("/api/case/journey/{step_key}")
def unmark_step(step_key: str, request: Request) -> JourneyResponse:
    key = _step_key(request, step_key)
    record = _load(request)
    record.journey_progress = request.app.state.journey_engine.unmark_step(
        record.journey_progress, key
    )
    _save(request, record)
    return _journey_response(request, record)


@router.put("/api/case/journey/{step_key}/checklist/{item_id}")
def toggle_checklist_item(
    step_key: str, item_id: str, body: ChecklistToggleRequest, request: Request
) -> JourneyResponse:
    key = _step_key(request, step_key)
    record = _load(request)
    record.journey_progress = request.app.state.journey_engine.toggle_checklist_item(
        record.journey_progress, key, item_id, body.checked
    )
    _save(request, record)
    return _journey_response(request, record)


# --- Export ---


@router.get("/api/case/export")
def export_case(
    request: Request, format: str = "text", locale: str | None = None
) -> Response:
    renderer = request.app.state.summary_renderer
    record = _load(request)

    if format == "json":
        return Response(content=renderer.render_json(record), media_type="application/json")
    if format != "text":
        raise HTTPException(status_code=400, detail=f"Unsupported export format: {format!r}")

    text = renderer.render_text(record, locale=locale or record.language)
    return Response(
        content=text,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename=case-details-{date.today()}.txt"},
    )
