"""Facilities economics engine for the campuscost library.

The FacilitiesEngine ties the data layer to the calculation modules:

1. **Categorize**: map each school's raw line items into six cost categories
   and derive per-school metrics, budget variance, and health.
2. **Unit economics**: compose staffing, facilities, depreciation, programs,
   misc, and timeback into revenue, cost, and margin at any enrollment.
3. **Break-even**: scan enrollment for the first break-even and tier-target
   margin points.
4. **Aggregate**: sum the analysed schools into portfolio and segment views.
5. **Scenario**: re-project portfolio costs at a utilization target under a
   named expense-rule preset.
6. **Deal**: weigh a prospective site's fixed costs against the portfolio.

Every call recomputes from the source records; nothing derived is cached.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from campuscost import categorizer, deal, portfolio, scenario
from campuscost.breakeven import find_breakeven
from campuscost.data.expense_rules import DEFAULT_PRESET, ExpenseRuleRegistry
from campuscost.data.tiers import DEFAULT_DEPRECIATION_YEARS
from campuscost.models.economics import MarginComparison
from campuscost.unit_economics import compute

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from campuscost.data.repository import SchoolRecordRepository
    from campuscost.models.costs import SchoolAnalysis
    from campuscost.models.deal import DealEvaluation, DealInputs
    from campuscost.models.economics import BreakevenResult, UnitEconomicsResult
    from campuscost.models.enums import SchoolType, TuitionTier
    from campuscost.models.portfolio import (
        Insight,
        PortfolioSummary,
        ScenarioResult,
        SegmentSummary,
    )
    from campuscost.models.school import SchoolRecord

logger = logging.getLogger(__name__)

SegmentDimension = Literal["school_type", "tuition_tier"]

ENGINE_VERSION = "0.1.0"


class FacilitiesEngine:
    """Per-school and portfolio facilities economics over a record repository.

    Args:
        repository: Source of raw school records.
        rules: Registry of expense-rule presets. Defaults to the built-in
            ``dashboard`` and ``expense-report`` presets.

    Example::

        from campuscost.data.repository import SchoolRecordRepository
        from campuscost.data.seed import SEED_SCHOOL_RECORDS

        engine = FacilitiesEngine(SchoolRecordRepository(SEED_SCHOOL_RECORDS))
        summary = engine.summarize(engine.analyze_portfolio())
    """

    def __init__(
        self,
        repository: SchoolRecordRepository,
        rules: ExpenseRuleRegistry | None = None,
    ) -> None:
        self._repository = repository
        self._rules = rules or ExpenseRuleRegistry()

    @property
    def repository(self) -> SchoolRecordRepository:
        return self._repository

    @property
    def rules(self) -> ExpenseRuleRegistry:
        return self._rules

    # ------------------------------------------------------------------
    # Per-school
    # ------------------------------------------------------------------

    def analyze_school(self, school_id: str) -> SchoolAnalysis:
        """Analyse one school from the repository.

        Raises:
            UnknownSchoolError: If ``school_id`` is not in the repository.
        """
        return categorizer.analyze(self._repository.get(school_id))

    def analyze_portfolio(
        self,
        school_type: SchoolType | None = None,
        tuition_tier: TuitionTier | None = None,
        operating_only: bool = False,
    ) -> list[SchoolAnalysis]:
        """Analyse every matching school, largest annual cost first."""
        records = self._repository.filter(
            school_type=school_type,
            tuition_tier=tuition_tier,
            operating_only=operating_only,
        )
        return self.analyze_records(records)

    def analyze_records(self, records: Iterable[SchoolRecord]) -> list[SchoolAnalysis]:
        analyses = [categorizer.analyze(r) for r in records]
        analyses.sort(key=lambda a: a.costs.grand_total, reverse=True)
        logger.debug("Analysed %d schools", len(analyses))
        return analyses

    def unit_economics(
        self,
        school: SchoolAnalysis,
        students: int | None = None,
    ) -> UnitEconomicsResult:
        """Full unit economics for a school, at capacity unless ``students`` is given.

        Facilities cost is the annual total excluding depreciation; depreciation
        is charged as the annual capex.
        """
        record = school.record
        return compute(
            record.tuition,
            record.capacity if students is None else students,
            school.costs.facilities_total,
            school.costs.annual_depreciation.total,
        )

    def breakeven(
        self,
        school: SchoolAnalysis,
        target_margin_pct: float | None = None,
    ) -> BreakevenResult:
        """Break-even and target enrollment for a school.

        The target defaults to the school's tuition-tier margin target.
        """
        record = school.record
        return find_breakeven(
            record.tuition,
            record.capacity,
            school.costs.facilities_total,
            school.costs.annual_depreciation.total,
            school.target_margin_pct if target_margin_pct is None else target_margin_pct,
        )

    def margin_comparison(self, school: SchoolAnalysis) -> MarginComparison:
        """Margin at capacity under actual costs vs the approved model's budget.

        The approved model's facilities cost is its per-student figure times
        capacity; its annual capex is the derived capex budget spread over
        the default depreciation period.
        """
        record = school.record
        approved = compute(
            record.tuition,
            record.capacity,
            record.model_facilities_per_student * record.capacity,
            school.budget.capex_budget / DEFAULT_DEPRECIATION_YEARS,
        )
        return MarginComparison(
            school_id=record.school_id,
            target_margin_pct=school.target_margin_pct,
            actual=self.unit_economics(school),
            approved=approved,
        )

    # ------------------------------------------------------------------
    # Portfolio
    # ------------------------------------------------------------------

    def summarize(self, schools: Sequence[SchoolAnalysis]) -> PortfolioSummary:
        return portfolio.summarize(schools)

    def segments(
        self,
        schools: Sequence[SchoolAnalysis],
        by: SegmentDimension = "school_type",
    ) -> list[SegmentSummary]:
        if by == "school_type":
            return portfolio.aggregate_by_school_type(schools)
        if by == "tuition_tier":
            return portfolio.aggregate_by_tuition_tier(schools)
        msg = f"Unknown segment dimension '{by}'"
        raise ValueError(msg)

    def insights(self, summary: PortfolioSummary) -> list[Insight]:
        return portfolio.generate_insights(summary)

    def scenario(
        self,
        schools: Sequence[SchoolAnalysis],
        target_utilization_pct: float,
        preset: str = DEFAULT_PRESET,
    ) -> ScenarioResult:
        """Project portfolio costs at ``target_utilization_pct`` under ``preset``.

        Raises:
            UnknownPresetError: If ``preset`` is not registered.
        """
        rules = self._rules.get_preset(preset)
        result = scenario.project(schools, target_utilization_pct, rules, preset=preset)
        logger.info(
            "Scenario at %.1f%% utilization (%s): %d students, avg cost/student %.2f",
            target_utilization_pct,
            preset,
            result.total_enrollment,
            result.avg_cost_per_student,
        )
        return result

    def evaluate_deal(
        self,
        inputs: DealInputs,
        summary: PortfolioSummary | None = None,
    ) -> DealEvaluation:
        """Evaluate a prospective site against the portfolio.

        Without ``summary`` the whole repository is analysed and summarized.
        """
        if summary is None:
            summary = self.summarize(self.analyze_portfolio())
        result = deal.evaluate_deal(inputs, summary)
        logger.info(
            "Deal %r: total fixed %.2f, target margin at %s students of %d",
            inputs.name,
            result.total_fixed,
            result.break_even_students,
            inputs.capacity,
        )
        return result
