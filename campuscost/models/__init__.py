"""Domain models for the campuscost engine."""

from campuscost.models.costs import (
    AnnualDepreciationCategory,
    BudgetComparison,
    CategorizedCosts,
    FacilitiesThresholds,
    FixedFacilitiesCategory,
    LeaseCategory,
    RevenueContext,
    SchoolAnalysis,
    SchoolMetrics,
    StudentServicesCategory,
    VariableFacilitiesCategory,
)
from campuscost.models.deal import DealEvaluation, DealInputs, DealScenarioRow
from campuscost.models.economics import (
    BreakevenResult,
    MarginComparison,
    UnitEconomicsResult,
)
from campuscost.models.enums import (
    CostBehavior,
    FormulaTier,
    HealthScore,
    InsightCategory,
    SchoolType,
    TuitionTier,
)
from campuscost.models.expense import CostSplit, ExpenseRule, ExpenseRuleSet
from campuscost.models.portfolio import (
    CategoryShare,
    HealthCounts,
    Insight,
    PortfolioSummary,
    ScenarioResult,
    SchoolProjection,
    SegmentSummary,
    SubcategoryAmount,
)
from campuscost.models.school import SchoolRecord

__all__ = [
    "AnnualDepreciationCategory",
    "BreakevenResult",
    "BudgetComparison",
    "CategorizedCosts",
    "CategoryShare",
    "CostBehavior",
    "CostSplit",
    "DealEvaluation",
    "DealInputs",
    "DealScenarioRow",
    "ExpenseRule",
    "ExpenseRuleSet",
    "FacilitiesThresholds",
    "FixedFacilitiesCategory",
    "FormulaTier",
    "HealthCounts",
    "HealthScore",
    "Insight",
    "InsightCategory",
    "LeaseCategory",
    "MarginComparison",
    "PortfolioSummary",
    "RevenueContext",
    "ScenarioResult",
    "SchoolAnalysis",
    "SchoolMetrics",
    "SchoolProjection",
    "SchoolRecord",
    "SchoolType",
    "SegmentSummary",
    "StudentServicesCategory",
    "SubcategoryAmount",
    "TuitionTier",
    "UnitEconomicsResult",
    "VariableFacilitiesCategory",
]
