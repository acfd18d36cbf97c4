"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from the project root
_project_root = Path(__file__).resolve().parent.parent.parent
load_dotenv(_project_root / ".env")

from campuscost.data.expense_rules import get_expense_rules  # noqa: E402
from campuscost.engine import ENGINE_VERSION  # noqa: E402
from campuscost.models.deal import DealInputs  # noqa: E402, TCH001
from campuscost.exceptions import (  # noqa: E402
    CampusCostError,
    UnknownPresetError,
    UnknownSchoolError,
)
from campuscost.models.enums import SchoolType, TuitionTier  # noqa: E402, TCH001
from campuscost.unit_economics import compute  # noqa: E402

if TYPE_CHECKING:
    from campuscost.api.deps import ApiSettings
    from campuscost.engine import FacilitiesEngine

logger = logging.getLogger(__name__)


class UnitEconomicsRequest(BaseModel):
    """Inputs for an ad-hoc unit economics calculation."""

    tuition: float = Field(ge=0)
    students: int = Field(ge=0)
    facilities_total: float = 0.0
    capex_annual: float = 0.0


def create_app(
    *,
    engine: FacilitiesEngine | None = None,
    settings: ApiSettings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created from environment settings on first
        request.
    settings
        Optional request defaults. If not provided, they are read from
        environment variables on first use.
    """
    app = FastAPI(title="campuscost", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own
    app.state.engine = engine
    app.state.settings = settings

    def _get_settings() -> ApiSettings:
        cfg: ApiSettings | None = app.state.settings
        if cfg is not None:
            return cfg
        from campuscost.api.deps import load_settings

        cfg = load_settings()
        app.state.settings = cfg
        return cfg

    def _get_engine() -> FacilitiesEngine:
        eng: FacilitiesEngine | None = app.state.engine
        if eng is not None:
            return eng
        from campuscost.api.deps import create_engine

        eng = create_engine(_get_settings())
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/expense-rules
    # ------------------------------------------------------------------

    @app.get("/api/expense-rules")
    def expense_rules(preset: str | None = None) -> dict[str, Any]:
        name = preset or _get_settings().expense_preset
        try:
            rules = _get_engine().rules.get_preset(name)
        except UnknownPresetError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {
            "preset": name,
            "rules": [r.model_dump(mode="json") for r in get_expense_rules(rules)],
        }

    # ------------------------------------------------------------------
    # GET /api/schools
    # ------------------------------------------------------------------

    @app.get("/api/schools")
    def list_schools(
        school_type: SchoolType | None = None,
        tuition_tier: TuitionTier | None = None,
        operating_only: bool = False,
    ) -> list[dict[str, Any]]:
        analyses = _get_engine().analyze_portfolio(
            school_type=school_type,
            tuition_tier=tuition_tier,
            operating_only=operating_only,
        )
        return [a.model_dump(mode="json") for a in analyses]

    # ------------------------------------------------------------------
    # GET /api/schools/{school_id}
    # ------------------------------------------------------------------

    @app.get("/api/schools/{school_id}")
    def school_detail(school_id: str) -> dict[str, Any]:
        eng = _get_engine()
        try:
            analysis = eng.analyze_school(school_id)
        except UnknownSchoolError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

        return {
            "analysis": analysis.model_dump(mode="json"),
            "unit_economics": eng.unit_economics(analysis).model_dump(mode="json"),
            "breakeven": eng.breakeven(analysis).model_dump(mode="json"),
            "margin_comparison": eng.margin_comparison(analysis).model_dump(mode="json"),
        }

    # ------------------------------------------------------------------
    # GET /api/portfolio
    # ------------------------------------------------------------------

    @app.get("/api/portfolio")
    def portfolio_summary(
        school_type: SchoolType | None = None,
        tuition_tier: TuitionTier | None = None,
        operating_only: bool = False,
    ) -> dict[str, Any]:
        eng = _get_engine()
        analyses = eng.analyze_portfolio(
            school_type=school_type,
            tuition_tier=tuition_tier,
            operating_only=operating_only,
        )
        summary = eng.summarize(analyses)
        return {
            "summary": summary.model_dump(mode="json"),
            "insights": [i.model_dump(mode="json") for i in eng.insights(summary)],
        }

    # ------------------------------------------------------------------
    # GET /api/segments
    # ------------------------------------------------------------------

    @app.get("/api/segments")
    def segments(
        by: Literal["school_type", "tuition_tier"] = "school_type",
    ) -> list[dict[str, Any]]:
        eng = _get_engine()
        return [s.model_dump(mode="json") for s in eng.segments(eng.analyze_portfolio(), by=by)]

    # ------------------------------------------------------------------
    # GET /api/scenario
    # ------------------------------------------------------------------

    @app.get("/api/scenario")
    def scenario(
        utilization: float | None = Query(default=None, ge=0),
        preset: str | None = None,
    ) -> dict[str, Any]:
        cfg = _get_settings()
        eng = _get_engine()
        try:
            result = eng.scenario(
                eng.analyze_portfolio(),
                cfg.scenario_utilization_pct if utilization is None else utilization,
                preset or cfg.expense_preset,
            )
        except UnknownPresetError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except CampusCostError as exc:
            logger.exception("Engine error during scenario projection")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/unit-economics
    # ------------------------------------------------------------------

    @app.post("/api/unit-economics")
    def unit_economics(request: UnitEconomicsRequest) -> dict[str, Any]:
        result = compute(
            request.tuition,
            request.students,
            request.facilities_total,
            request.capex_annual,
        )
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/deal
    # ------------------------------------------------------------------

    @app.post("/api/deal")
    def evaluate_deal(inputs: DealInputs) -> dict[str, Any]:
        return _get_engine().evaluate_deal(inputs).model_dump(mode="json")

    return app
