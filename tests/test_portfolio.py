"""Tests for portfolio summaries, segment roll-ups, and insights."""

from __future__ import annotations

import pytest

from campuscost.categorizer import analyze
from campuscost.data.seed import SEED_SCHOOL_RECORDS
from campuscost.data.tiers import SCHOOL_TYPE_LABELS, TUITION_TIER_LABELS
from campuscost.models.costs import SchoolAnalysis
from campuscost.models.enums import InsightCategory, SchoolType
from campuscost.portfolio import (
    aggregate_by_school_type,
    aggregate_by_tuition_tier,
    generate_insights,
    summarize,
)


@pytest.fixture()
def schools() -> list[SchoolAnalysis]:
    return [analyze(r) for r in SEED_SCHOOL_RECORDS]


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


class TestSummarize:
    def test_totals_match_schools(self, schools: list[SchoolAnalysis]) -> None:
        summary = summarize(schools)

        assert summary.total_schools == len(SEED_SCHOOL_RECORDS)
        assert summary.total_enrollment == sum(r.current_enrollment for r in SEED_SCHOOL_RECORDS)
        assert summary.total_capacity == sum(r.capacity for r in SEED_SCHOOL_RECORDS)
        assert summary.grand_total == pytest.approx(sum(s.costs.grand_total for s in schools))
        assert summary.total_capex_buildout == pytest.approx(
            sum(r.capex_buildout for r in SEED_SCHOOL_RECORDS)
        )

    def test_category_totals_add_up(self, schools: list[SchoolAnalysis]) -> None:
        summary = summarize(schools)
        assert summary.grand_total == pytest.approx(
            summary.total_lease
            + summary.total_fixed_facilities
            + summary.total_variable_facilities
            + summary.total_student_services
            + summary.total_annual_depreciation
        )
        assert summary.total_excluding_lease == pytest.approx(
            summary.grand_total - summary.total_lease
        )

    def test_sunk_plus_controllable_is_grand_total(self, schools: list[SchoolAnalysis]) -> None:
        summary = summarize(schools)
        assert summary.total_sunk_costs + summary.total_controllable_costs == pytest.approx(
            summary.grand_total
        )

    def test_weighted_averages(self, schools: list[SchoolAnalysis]) -> None:
        summary = summarize(schools)
        assert summary.avg_cost_per_student == pytest.approx(
            summary.grand_total / summary.total_enrollment
        )
        assert summary.avg_utilization == pytest.approx(
            summary.total_enrollment / summary.total_capacity * 100
        )
        assert summary.facilities_pct_of_revenue == pytest.approx(
            summary.grand_total / summary.total_revenue_current * 100
        )

    def test_breakdown_sorted_and_sums_to_100(self, schools: list[SchoolAnalysis]) -> None:
        breakdown = summarize(schools).category_breakdown

        assert len(breakdown) == 5
        amounts = [c.amount for c in breakdown]
        assert amounts == sorted(amounts, reverse=True)
        assert sum(c.pct_of_total for c in breakdown) == pytest.approx(100.0)
        for category in breakdown:
            assert sum(s.amount for s in category.subcategories) == pytest.approx(category.amount)

    def test_health_counts(self, schools: list[SchoolAnalysis]) -> None:
        counts = summarize(schools).schools_by_health

        assert counts.green + counts.yellow + counts.red + counts.pre_opening == len(schools)
        # alpha_piedmont and alpha_boston have not opened
        assert counts.pre_opening == 2

    def test_capex_budget_totals(self, schools: list[SchoolAnalysis]) -> None:
        summary = summarize(schools)
        assert summary.total_capex_budget == pytest.approx(
            sum(s.budget.capex_budget for s in schools)
        )
        assert summary.total_capex_delta == pytest.approx(
            summary.total_capex_buildout - summary.total_capex_budget
        )

    def test_empty_portfolio(self) -> None:
        summary = summarize([])

        assert summary.total_schools == 0
        assert summary.grand_total == 0.0
        assert summary.avg_cost_per_student == 0.0
        assert summary.avg_utilization == 0.0
        assert all(c.pct_of_total == 0.0 for c in summary.category_breakdown)


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


class TestSegments:
    def test_by_school_type(self, schools: list[SchoolAnalysis]) -> None:
        segments = aggregate_by_school_type(schools)

        assert {s.segment for s in segments} == set(SCHOOL_TYPE_LABELS.values())
        assert sum(s.school_count for s in segments) == len(schools)
        costs = [s.total_costs for s in segments]
        assert costs == sorted(costs, reverse=True)

    def test_by_tuition_tier(self, schools: list[SchoolAnalysis]) -> None:
        segments = aggregate_by_tuition_tier(schools)

        assert {s.segment for s in segments} == set(TUITION_TIER_LABELS.values())
        assert sum(s.total_enrollment for s in segments) == sum(
            r.current_enrollment for r in SEED_SCHOOL_RECORDS
        )

    def test_empty_segments_omitted(self, schools: list[SchoolAnalysis]) -> None:
        alpha_only = [s for s in schools if s.record.school_type == SchoolType.ALPHA_SCHOOL]
        segments = aggregate_by_school_type(alpha_only)

        assert len(segments) == 1
        assert segments[0].segment == "Alpha School"
        assert segments[0].school_ids == [s.school_id for s in alpha_only]

    def test_segment_averages(self, schools: list[SchoolAnalysis]) -> None:
        for segment in aggregate_by_school_type(schools):
            if segment.total_enrollment > 0:
                assert segment.avg_cost_per_student == pytest.approx(
                    segment.total_costs / segment.total_enrollment
                )
            assert segment.utilization_pct == pytest.approx(
                segment.total_enrollment / segment.total_capacity * 100
            )


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------


class TestInsights:
    def test_insight_ids(self, schools: list[SchoolAnalysis]) -> None:
        insights = generate_insights(summarize(schools))
        assert [i.id for i in insights] == [
            "lease-commitment",
            "fixed-cost-burden",
            "student-services",
            "capex-exposure",
            "capacity-opportunity",
        ]

    def test_lease_share(self, schools: list[SchoolAnalysis]) -> None:
        summary = summarize(schools)
        lease = generate_insights(summary)[0]

        assert lease.category == InsightCategory.FIXED_COST_WARNING
        assert lease.metric == pytest.approx(summary.total_lease)
        assert lease.share_pct == pytest.approx(summary.total_lease / summary.grand_total * 100)

    def test_capacity_opportunity(self, schools: list[SchoolAnalysis]) -> None:
        summary = summarize(schools)
        opportunity = generate_insights(summary)[-1]

        assert opportunity.category == InsightCategory.OPPORTUNITY
        assert opportunity.metric == pytest.approx(summary.avg_utilization)
        assert opportunity.open_seats == summary.total_capacity - summary.total_enrollment
