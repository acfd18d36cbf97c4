"""Portfolio aggregation: summaries, segment roll-ups, and insights.

Everything here works on an explicit collection of analysed schools.
Filtering happens before the call; the aggregator has no notion of a
selected filter.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from campuscost.data.tiers import SCHOOL_TYPE_LABELS, TUITION_TIER_LABELS
from campuscost.models.enums import HealthScore, InsightCategory
from campuscost.models.portfolio import (
    CategoryShare,
    HealthCounts,
    Insight,
    PortfolioSummary,
    SegmentSummary,
    SubcategoryAmount,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from campuscost.models.costs import SchoolAnalysis


def summarize(schools: Sequence[SchoolAnalysis]) -> PortfolioSummary:
    """Sum and average per-school metrics across ``schools``."""
    total_enrollment = sum(s.record.current_enrollment for s in schools)
    total_capacity = sum(s.record.capacity for s in schools)

    total_lease = sum(s.costs.lease.total for s in schools)
    total_fixed = sum(s.costs.fixed_facilities.total for s in schools)
    total_variable = sum(s.costs.variable_facilities.total for s in schools)
    total_services = sum(s.costs.student_services.total for s in schools)
    total_depreciation = sum(s.costs.annual_depreciation.total for s in schools)
    total_capex = sum(s.costs.capex_buildout for s in schools)

    grand_total = total_lease + total_fixed + total_variable + total_services + total_depreciation
    total_excluding_lease = grand_total - total_lease
    effective_enrollment = max(total_enrollment, 1)

    total_sqft = sum(s.record.sqft for s in schools)
    safe_sqft = max(total_sqft, 1)
    total_net_fac_fees = grand_total - total_depreciation

    revenue_current = sum(s.revenue.current for s in schools)
    revenue_capacity = sum(s.revenue.at_capacity for s in schools)

    operating = [s for s in schools if s.is_operating]
    avg_marginal = (
        sum(s.marginal_cost_per_student for s in operating) / len(operating) if operating else 0.0
    )

    total_capex_budget = sum(s.budget.capex_budget for s in schools)
    total_capex_delta = total_capex - total_capex_budget

    breakdown = [
        _share("Lease", total_lease, grand_total, [("Rent", total_lease)]),
        _share(
            "Fixed Facilities",
            total_fixed,
            grand_total,
            [
                ("Security", sum(s.costs.fixed_facilities.security for s in schools)),
                ("IT Maintenance", sum(s.costs.fixed_facilities.it_maintenance for s in schools)),
                ("Landscaping", sum(s.costs.fixed_facilities.landscaping for s in schools)),
            ],
        ),
        _share(
            "Variable Facilities",
            total_variable,
            grand_total,
            [
                ("Repairs/Maintenance", sum(s.costs.variable_facilities.repairs for s in schools)),
                ("Utilities", sum(s.costs.variable_facilities.utilities for s in schools)),
                ("Janitorial", sum(s.costs.variable_facilities.janitorial for s in schools)),
            ],
        ),
        _share(
            "Student Services",
            total_services,
            grand_total,
            [
                ("Food Services", sum(s.costs.student_services.food_services for s in schools)),
                ("Transportation", sum(s.costs.student_services.transportation for s in schools)),
            ],
        ),
        _share(
            "Annual Depreciation",
            total_depreciation,
            grand_total,
            [("CapEx Depreciation", total_depreciation)],
        ),
    ]
    breakdown.sort(key=lambda c: c.amount, reverse=True)

    return PortfolioSummary(
        total_schools=len(schools),
        total_enrollment=total_enrollment,
        total_capacity=total_capacity,
        avg_utilization=_pct(total_enrollment, total_capacity),
        total_lease=total_lease,
        total_fixed_facilities=total_fixed,
        total_variable_facilities=total_variable,
        total_student_services=total_services,
        total_annual_depreciation=total_depreciation,
        total_capex_buildout=total_capex,
        grand_total=grand_total,
        total_excluding_lease=total_excluding_lease,
        avg_cost_per_student=grand_total / effective_enrollment,
        avg_excl_lease_per_student=total_excluding_lease / effective_enrollment,
        total_revenue_current=revenue_current,
        total_revenue_at_capacity=revenue_capacity,
        total_revenue_gap=revenue_capacity - revenue_current,
        facilities_pct_of_revenue=_pct(grand_total, revenue_current),
        total_sunk_costs=sum(s.sunk_costs for s in schools),
        total_controllable_costs=sum(s.controllable_costs for s in schools),
        avg_marginal_cost=avg_marginal,
        total_sqft=total_sqft,
        total_net_facilities_fees=total_net_fac_fees,
        avg_lease_per_sqft=total_lease / safe_sqft,
        avg_fixed_facilities_per_sqft=total_fixed / safe_sqft,
        avg_variable_facilities_per_sqft=total_variable / safe_sqft,
        avg_student_services_per_sqft=total_services / safe_sqft,
        avg_depreciation_per_sqft=total_depreciation / safe_sqft,
        avg_total_cost_per_sqft=grand_total / safe_sqft,
        avg_net_facilities_fee_per_sqft=total_net_fac_fees / safe_sqft,
        schools_by_health=_health_counts(schools),
        total_budget_variance=sum(s.budget.total_variance for s in schools),
        total_capex_budget=total_capex_budget,
        total_capex_delta=total_capex_delta,
        total_capex_delta_pct=_pct(total_capex_delta, total_capex_budget),
        category_breakdown=breakdown,
    )


def aggregate_by(
    schools: Sequence[SchoolAnalysis],
    key_fn: Callable[[SchoolAnalysis], str],
) -> list[SegmentSummary]:
    """Group ``schools`` by ``key_fn`` and summarize each group.

    Empty groups never appear. Segments are ordered by total cost, largest
    first.
    """
    groups: dict[str, list[SchoolAnalysis]] = defaultdict(list)
    for school in schools:
        groups[key_fn(school)].append(school)

    segments = [_segment(name, members) for name, members in groups.items()]
    segments.sort(key=lambda seg: seg.total_costs, reverse=True)
    return segments


def aggregate_by_school_type(schools: Sequence[SchoolAnalysis]) -> list[SegmentSummary]:
    return aggregate_by(schools, lambda s: SCHOOL_TYPE_LABELS[s.record.school_type])


def aggregate_by_tuition_tier(schools: Sequence[SchoolAnalysis]) -> list[SegmentSummary]:
    return aggregate_by(schools, lambda s: TUITION_TIER_LABELS[s.record.tuition_tier])


def generate_insights(summary: PortfolioSummary) -> list[Insight]:
    """Derive the headline fixed-cost and utilization observations."""
    fixed_portion = (
        summary.total_lease + summary.total_fixed_facilities + summary.total_annual_depreciation
    )
    return [
        Insight(
            id="lease-commitment",
            category=InsightCategory.FIXED_COST_WARNING,
            title="Lease Commitment",
            metric=summary.total_lease,
            unit="$ annual lease",
            share_pct=_pct(summary.total_lease, summary.grand_total),
        ),
        Insight(
            id="fixed-cost-burden",
            category=InsightCategory.FIXED_COST_WARNING,
            title="Total Fixed Cost Burden",
            metric=fixed_portion,
            unit="$ fixed costs",
            share_pct=_pct(fixed_portion, summary.grand_total),
        ),
        Insight(
            id="student-services",
            category=InsightCategory.INFO,
            title="Student Services",
            metric=summary.total_student_services,
            unit="$ student services",
            share_pct=_pct(summary.total_student_services, summary.grand_total),
        ),
        Insight(
            id="capex-exposure",
            category=InsightCategory.FIXED_COST_WARNING,
            title="Total CapEx Exposure",
            metric=summary.total_capex_buildout,
            unit="$ total capex",
        ),
        Insight(
            id="capacity-opportunity",
            category=InsightCategory.OPPORTUNITY,
            title="Utilization Opportunity",
            metric=summary.avg_utilization,
            unit="% utilization",
            open_seats=summary.total_capacity - summary.total_enrollment,
        ),
    ]


def _segment(name: str, members: list[SchoolAnalysis]) -> SegmentSummary:
    total_enrollment = sum(s.record.current_enrollment for s in members)
    total_capacity = sum(s.record.capacity for s in members)
    total_costs = sum(s.costs.grand_total for s in members)
    # Revenue counts at least one student per school, as in the per-school metrics
    total_revenue = sum(max(s.record.current_enrollment, 1) * s.record.tuition for s in members)

    return SegmentSummary(
        segment=name,
        school_count=len(members),
        total_enrollment=total_enrollment,
        total_capacity=total_capacity,
        utilization_pct=_pct(total_enrollment, total_capacity),
        total_costs=total_costs,
        avg_cost_per_student=total_costs / total_enrollment if total_enrollment > 0 else 0.0,
        avg_pct_of_tuition=_pct(total_costs, total_revenue),
        school_ids=[s.record.school_id for s in members],
    )


def _share(
    category: str,
    amount: float,
    grand_total: float,
    subcategories: list[tuple[str, float]],
) -> CategoryShare:
    return CategoryShare(
        category=category,
        amount=amount,
        pct_of_total=_pct(amount, grand_total),
        subcategories=[SubcategoryAmount(name=n, amount=a) for n, a in subcategories],
    )


def _health_counts(schools: Sequence[SchoolAnalysis]) -> HealthCounts:
    counts = HealthCounts()
    for school in schools:
        if school.health_score == HealthScore.GREEN:
            counts.green += 1
        elif school.health_score == HealthScore.YELLOW:
            counts.yellow += 1
        elif school.health_score == HealthScore.RED:
            counts.red += 1
        else:
            counts.pre_opening += 1
    return counts


def _pct(numerator: float, denominator: float) -> float:
    return (numerator / denominator) * 100 if denominator > 0 else 0.0
