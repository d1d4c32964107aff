"""Tests for the case API router."""

from __future__ import annotations

import inspect
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from worknav.case.models import CaseRecord
from worknav.case.store import InMemoryCaseStore, JsonFileCaseStore
from worknav.core.config import Settings, StorageConfig
from worknav.web.app import create_app, create_case_store
from worknav.web.case_router import router as case_router


@pytest.fixture
def store():
    return InMemoryCaseStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(settings=Settings(), store=store))


class FailingStore(InMemoryCaseStore):
    def save(self, record: CaseRecord) -> bool:
        return False


class TestAppFactory:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_memory_backend(self):
        settings = Settings(storage=StorageConfig(backend="memory"))
        assert isinstance(create_case_store(settings), InMemoryCaseStore)

    def test_file_backend(self, tmp_path):
        settings = Settings(storage=StorageConfig(backend="file", data_dir=str(tmp_path)))
        assert isinstance(create_case_store(settings), JsonFileCaseStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown storage backend"):
            create_case_store(Settings(storage=StorageConfig(backend="redis")))

    def test_handlers_run_in_threadpool(self):
        for route in case_router.routes:
            assert not inspect.iscoroutinefunction(route.endpoint), route.path

    def test_file_backend_round_trip(self, tmp_path):
        settings = Settings(storage=StorageConfig(backend="file", data_dir=str(tmp_path)))
        client = TestClient(create_app(settings=settings))
        assert client.patch("/api/case", json={"scenario": "fired"}).status_code == 200
        assert client.get("/api/case").json()["scenario"] == "fired"
        assert (tmp_path / "wrn-case-state.json").exists()


class TestCaseEndpoints:
    def test_get_defaults(self, client):
        data = client.get("/api/case").json()
        assert data["acas_status"] == "not-started"
        assert data["journey_progress"] == {}

    def test_update_intake(self, client, store):
        resp = client.patch(
            "/api/case",
            json={
                "scenario": "fired",
                "incident_date": "2025-01-01",
                "acas_status": "started",
                "acas_start_date": "2025-01-10",
            },
        )
        assert resp.status_code == 200
        saved = store.load()
        assert saved.incident_date == date(2025, 1, 1)
        assert saved.acas_start_date == date(2025, 1, 10)

    def test_partial_update_keeps_other_fields(self, client, store):
        client.patch("/api/case", json={"scenario": "bullying"})
        client.patch("/api/case", json={"incident_date_unknown": True})
        saved = store.load()
        assert saved.scenario == "bullying"
        assert saved.incident_date_unknown is True

    def test_future_incident_date_rejected(self, client, store):
        future = (date.today() + timedelta(days=3)).isoformat()
        resp = client.patch("/api/case", json={"incident_date": future})
        assert resp.status_code == 422
        assert "incident_date" in resp.json()["detail"]["errors"]
        assert store.load().incident_date is None

    def test_invalid_advisor_email(self, client):
        resp = client.patch("/api/case", json={"legal_advisor": {"email": "nope"}})
        assert resp.status_code == 422
        assert "legal_advisor.email" in resp.json()["detail"]["errors"]

    def test_reset_keeps_language(self, client, store):
        client.patch("/api/case", json={"scenario": "fired", "language": "cy"})
        data = client.post("/api/case/reset").json()
        assert data["scenario"] is None
        assert data["language"] == "cy"
        assert store.load().scenario is None

    def test_save_failure(self):
        client = TestClient(create_app(store=FailingStore()))
        resp = client.patch("/api/case", json={"scenario": "fired"})
        assert resp.status_code == 503


class TestDeadlineEndpoint:
    def test_unknown_deadline(self, client):
        data = client.get("/api/case/deadline").json()
        assert data["deadline"] is None
        assert data["urgency"] == "warning"
        assert data["next_action"] == "deadline.next_action.start_acas"

    def test_with_extension(self, client):
        client.patch(
            "/api/case",
            json={
                "incident_date": "2025-01-01",
                "acas_status": "started",
                "acas_start_date": "2025-03-01",
            },
        )
        data = client.get("/api/case/deadline", params={"today": "2025-04-20"}).json()
        assert data["deadline"] == "2025-04-30"
        assert data["formatted_deadline"] == "30 April 2025"
        assert data["includes_acas_extension"] is True
        assert data["days_left"] == 10
        assert data["urgency"] == "warning"
        assert data["urgency_label"] == "Your deadline is getting close."

    def test_locale(self, client):
        client.patch("/api/case", json={"incident_date": "2025-01-01"})
        data = client.get("/api/case/deadline", params={"locale": "cy"}).json()
        assert data["formatted_deadline"] == "31 Mawrth 2025"


class TestJourneyEndpoints:
    def test_initial_journey(self, client):
        data = client.get("/api/case/journey").json()
        assert data["current_step_index"] == 0
        assert data["current_step"] == "incident"
        assert data["total_steps"] == 7
        assert data["steps"][0]["status"] == "current"
        assert data["steps"][2]["checklist"]["total"] == 5

    def test_complete_steps(self, client, store):
        assert client.post("/api/case/journey/incident/complete").status_code == 200
        resp = client.post(
            "/api/case/journey/acas/complete", json={"certificate_number": "R123456/01/23"}
        )
        assert resp.status_code == 200
        assert resp.json()["current_step"] == "et1"
        saved = store.load()
        assert saved.journey_progress["acas"].certificate_number == "R123456/01/23"

    def test_bad_certificate(self, client, store):
        client.post("/api/case/journey/incident/complete")
        resp = client.post(
            "/api/case/journey/acas/complete", json={"certificate_number": "bad-format"}
        )
        assert resp.status_code == 422
        assert "certificate_number" in resp.json()["detail"]["errors"]
        assert "acas" not in store.load().journey_progress

    def test_skipping_ahead_rejected(self, client):
        resp = client.post("/api/case/journey/et3/complete")
        assert resp.status_code == 422
        assert "step" in resp.json()["detail"]["errors"]

    def test_unknown_step(self, client):
        assert client.post("/api/case/journey/appeal/complete").status_code == 404
        assert client.delete("/api/case/journey/appeal").status_code == 404

    def test_unmark(self, client, store):
        client.post("/api/case/journey/incident/complete")
        client.put("/api/case/journey/incident/checklist/notes", json={"checked": True})
        resp = client.delete("/api/case/journey/incident")
        assert resp.status_code == 200
        assert resp.json()["current_step"] == "incident"
        assert "incident" not in store.load().journey_progress

    def test_toggle_checklist(self, client, store):
        resp = client.put("/api/case/journey/et1/checklist/et1-details", json={"checked": True})
        assert resp.status_code == 200
        et1 = resp.json()["steps"][2]
        assert et1["checklist"]["completed"] == 1
        assert et1["status"] == "locked"
        assert store.load().journey_progress["et1"].completed is False

        client.put("/api/case/journey/et1/checklist/et1-details", json={"checked": False})
        assert store.load().journey_progress["et1"].checklist_items == set()


class TestExportEndpoint:
    def test_text_export(self, client):
        client.patch("/api/case", json={"scenario": "fired"})
        resp = client.get("/api/case/export")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert "Situation: I was fired or dismissed" in resp.text

    def test_json_export(self, client):
        resp = client.get("/api/case/export", params={"format": "json"})
        assert resp.status_code == 200
        assert resp.json()["acas_status"] == "not-started"

    def test_unsupported_format(self, client):
        assert client.get("/api/case/export", params={"format": "pdf"}).status_code == 400
