"""FastAPI application for Work Rights Navigator.

Exposes the claimant's case record, tribunal deadline and journey stepper
as a JSON API for the browser front end.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from worknav.case.store import CaseRepository, InMemoryCaseStore, JsonFileCaseStore
from worknav.core.config import Settings
from worknav.deadlines.engine import DeadlineEngine
from worknav.export.renderer import CaseSummaryRenderer
from worknav.i18n.engine import I18nEngine
from worknav.journey.engine import JourneyEngine
from worknav.web.case_router import router as case_router

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = "0.1.0"


def create_case_store(settings: Settings) -> CaseRepository:
    """Build the configured case store backend."""
    backend = settings.storage.backend
    if backend == "memory":
        return InMemoryCaseStore(storage_key=settings.storage.storage_key)
    if backend == "file":
        return JsonFileCaseStore(settings.storage.data_dir, settings.storage.storage_key)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def create_app(
    settings: Settings | None = None,
    store: CaseRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with their own store.

    Args:
        settings: Application settings. Defaults to Settings().
        store: Optional pre-built case store.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("worknav").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="Work Rights Navigator",
        description="Employment tribunal deadline and journey tracker",
        version="0.1.0",
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if store is None:
        store = create_case_store(settings)

    i18n_engine = I18nEngine(
        bundles_dir=settings.i18n.bundles_dir,
        default_locale=settings.i18n.default_locale,
    )
    deadline_engine = DeadlineEngine(config_path=settings.deadline.rules_path, i18n=i18n_engine)
    journey_engine = JourneyEngine()

    app.state.settings = settings
    app.state.case_store = store
    app.state.i18n_engine = i18n_engine
    app.state.deadline_engine = deadline_engine
    app.state.journey_engine = journey_engine
    app.state.summary_renderer = CaseSummaryRenderer(
        journey_engine=journey_engine,
        deadline_engine=deadline_engine,
        i18n=i18n_engine,
    )

    app.include_router(case_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="worknav")

    logger.info("Work Rights Navigator started (%s)", settings.environment)
    return app
