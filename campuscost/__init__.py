"""Campuscost facilities economics engine.

Usage::

    from campuscost import create_default_engine

    engine = create_default_engine()
    schools = engine.analyze_portfolio()
    summary = engine.summarize(schools)
    scenario = engine.scenario(schools, 80.0, "dashboard")
"""

from campuscost.engine import FacilitiesEngine
from campuscost.exceptions import (
    CampusCostError,
    RecordLoadError,
    UnknownPresetError,
    UnknownSchoolError,
)
from campuscost.factory import create_default_engine
from campuscost.models.costs import BudgetComparison, CategorizedCosts, SchoolAnalysis
from campuscost.models.deal import DealEvaluation, DealInputs
from campuscost.models.economics import BreakevenResult, MarginComparison, UnitEconomicsResult
from campuscost.models.enums import HealthScore, SchoolType, TuitionTier
from campuscost.models.expense import ExpenseRule, ExpenseRuleSet
from campuscost.models.portfolio import (
    Insight,
    PortfolioSummary,
    ScenarioResult,
    SegmentSummary,
)
from campuscost.models.school import SchoolRecord

__all__ = [
    "BreakevenResult",
    "BudgetComparison",
    "CampusCostError",
    "CategorizedCosts",
    "DealEvaluation",
    "DealInputs",
    "ExpenseRule",
    "ExpenseRuleSet",
    "FacilitiesEngine",
    "HealthScore",
    "Insight",
    "MarginComparison",
    "PortfolioSummary",
    "RecordLoadError",
    "ScenarioResult",
    "SchoolAnalysis",
    "SchoolRecord",
    "SchoolType",
    "SegmentSummary",
    "TuitionTier",
    "UnitEconomicsResult",
    "UnknownPresetError",
    "UnknownSchoolError",
    "create_default_engine",
]
