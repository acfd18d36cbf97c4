"""Cost categorization and per-school analysis.

Raw line items map into six categories:

1. **Lease**: rent, locked in on day 1.
2. **Fixed facilities**: security, IT maintenance, landscaping.
3. **Variable facilities**: janitorial, utilities, repairs/maintenance.
4. **Student services**: food services, transportation.
5. **Annual depreciation**: total including capex minus total excluding capex.
6. **CapEx buildout**: one-time, reported separately and never in the total.

Categories hold raw, unsplit line items regardless of the expense-rule
preset; presets only apply when projecting scenarios. Depreciation is backed
out of the two cost rollups and may come out negative when they disagree.
That value is kept as is and flagged so the anomaly stays visible.
"""

from __future__ import annotations

import logging
import math

from campuscost.data.tiers import (
    CAPEX_BUDGET_RATE_PER_SEAT,
    DEFAULT_DEPRECIATION_YEARS,
    TUITION_TIER_RANGES,
)
from campuscost.formulas import target_margin_pct
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
from campuscost.models.enums import HealthScore
from campuscost.models.school import SchoolRecord

logger = logging.getLogger(__name__)

# Utilization at or above which a school counts as well filled
_WELL_UTILIZED = 0.70
# Facilities % of tuition at capacity above this multiple of target is structural
_RENEGOTIATE_MULTIPLE = 1.5
_CAPACITY_75 = 0.75

FLAG_NEGATIVE_DEPRECIATION = "negative_depreciation"
FLAG_OVER_CAPACITY = "over_capacity"
FLAG_PRE_OPENING = "pre_opening"
FLAG_TUITION_TIER_MISMATCH = "tuition_tier_mismatch"


def categorize(record: SchoolRecord) -> CategorizedCosts:
    """Map a school's raw line items into the six-category structure."""
    lease = LeaseCategory(rent=record.lease, total=record.lease)

    fixed_facilities = FixedFacilitiesCategory(
        security=record.security,
        it_maintenance=record.it_maintenance,
        landscaping=record.landscaping,
        total=record.security + record.it_maintenance + record.landscaping,
    )

    variable_facilities = VariableFacilitiesCategory(
        janitorial=record.janitorial,
        utilities=record.utilities,
        repairs=record.repairs,
        total=record.janitorial + record.utilities + record.repairs,
    )

    student_services = StudentServicesCategory(
        food_services=record.food_services,
        transportation=record.transportation,
        total=record.food_services + record.transportation,
    )

    depreciation = record.total_including_capex - record.total_excluding_capex
    annual_depreciation = AnnualDepreciationCategory(
        depreciation=depreciation,
        total=depreciation,
    )

    grand_total = (
        lease.total
        + fixed_facilities.total
        + variable_facilities.total
        + student_services.total
        + annual_depreciation.total
    )

    return CategorizedCosts(
        lease=lease,
        fixed_facilities=fixed_facilities,
        variable_facilities=variable_facilities,
        student_services=student_services,
        annual_depreciation=annual_depreciation,
        capex_buildout=record.capex_buildout,
        grand_total=grand_total,
        total_excluding_lease=grand_total - lease.total,
    )


def compare_budget(record: SchoolRecord, costs: CategorizedCosts) -> BudgetComparison:
    """Compare year-end actuals with the approved model, per capacity seat.

    The capex budget is derived as ``rate x capacity x depreciation period``,
    where the period is backed out of buildout / annual depreciation and
    defaults to 10 years when there is no positive depreciation.
    """
    capacity = record.capacity

    actual_fac = record.total_excluding_capex / capacity
    model_fac = record.model_facilities_per_student
    fac_delta = actual_fac - model_fac

    actual_total = record.total_including_capex / capacity
    model_total = record.model_total_per_student
    total_delta = actual_total - model_total

    annual_depr = costs.annual_depreciation.total
    depr_period = (
        record.capex_buildout / annual_depr if annual_depr > 0 else DEFAULT_DEPRECIATION_YEARS
    )
    capex_budget = CAPEX_BUDGET_RATE_PER_SEAT[record.school_type] * capacity * depr_period
    capex_delta = record.capex_buildout - capex_budget
    # Zero period means depreciation with no recorded buildout
    budget_depreciation = capex_budget / depr_period if depr_period > 0 else 0.0

    return BudgetComparison(
        model_facilities_per_student=model_fac,
        actual_facilities_per_student=actual_fac,
        facilities_delta=fac_delta,
        facilities_delta_pct=_pct(fac_delta, model_fac),
        model_total_per_student=model_total,
        actual_total_per_student=actual_total,
        total_delta=total_delta,
        total_delta_pct=_pct(total_delta, model_total),
        capex_buildout=record.capex_buildout,
        capex_budget=capex_budget,
        capex_delta=capex_delta,
        capex_delta_pct=_pct(capex_delta, capex_budget),
        capex_per_seat=record.capex_buildout / capacity,
        depreciation_period_years=depr_period,
        annual_depreciation=annual_depr,
        depreciation_per_seat=annual_depr / capacity,
        total_variance=fac_delta * capacity,
        facilities_opex_variance_per_seat=(
            costs.facilities_total - model_fac * capacity
        ) / capacity,
        depreciation_variance_per_seat=(annual_depr - budget_depreciation) / capacity,
    )


def analyze(record: SchoolRecord) -> SchoolAnalysis:
    """Derive the full per-school record: costs, metrics, budget, health."""
    costs = categorize(record)
    flags = _collect_flags(record, costs)

    enrollment = max(record.current_enrollment, 1)
    utilization_rate = record.current_enrollment / record.capacity
    is_operating = record.is_operating
    target_pct = target_margin_pct(record.tuition)

    revenue_current = record.current_enrollment * record.tuition
    revenue_capacity = record.capacity * record.tuition
    revenue = RevenueContext(
        current=revenue_current,
        at_capacity=revenue_capacity,
        revenue_gap=revenue_capacity - revenue_current,
    )

    # Percent-of-tuition uses at least one student so pre-opening schools stay finite
    tuition_revenue_current = enrollment * record.tuition
    pct_current = _pct(costs.grand_total, tuition_revenue_current)
    pct_capacity = _pct(costs.grand_total, revenue_capacity)
    revenue_75 = math.floor(record.capacity * _CAPACITY_75) * record.tuition

    thresholds = FacilitiesThresholds(
        students_for_target=_students_for_share(costs.grand_total, target_pct, record.tuition),
        students_for_20_pct=_students_for_share(costs.grand_total, 20.0, record.tuition),
        pct_at_75_capacity=_pct(costs.grand_total, revenue_75),
        pct_at_100_capacity=pct_capacity,
    )

    metrics = SchoolMetrics(
        cost_per_student_current=costs.grand_total / enrollment,
        cost_per_student_capacity=costs.grand_total / record.capacity,
        pct_of_tuition_current=pct_current,
        pct_of_tuition_capacity=pct_capacity,
        total_excl_lease_per_student=costs.total_excluding_lease / enrollment,
        sqft_per_student=record.sqft / enrollment,
        cost_per_sqft=_per_sqft(costs.grand_total, record.sqft),
        lease_per_sqft=_per_sqft(costs.lease.total, record.sqft),
        fixed_facilities_per_sqft=_per_sqft(costs.fixed_facilities.total, record.sqft),
        variable_facilities_per_sqft=_per_sqft(costs.variable_facilities.total, record.sqft),
        student_services_per_sqft=_per_sqft(costs.student_services.total, record.sqft),
        depreciation_per_sqft=_per_sqft(costs.annual_depreciation.total, record.sqft),
        net_facilities_fee_per_sqft=_per_sqft(record.total_excluding_capex, record.sqft),
    )

    sunk_costs = costs.lease.total + costs.annual_depreciation.total
    controllable_costs = (
        costs.fixed_facilities.total
        + costs.variable_facilities.total
        + costs.student_services.total
    )

    # What the next student costs: variable-only lines
    variable_total = costs.variable_facilities.total + costs.student_services.total
    if is_operating:
        marginal_cost = variable_total / record.current_enrollment
    else:
        marginal_cost = max(variable_total, 0.0)

    health_score, health_verdict = _health(
        is_operating=is_operating,
        utilization_rate=utilization_rate,
        pct_current=pct_current,
        pct_capacity=pct_capacity,
        target_pct=target_pct,
    )

    return SchoolAnalysis(
        record=record,
        costs=costs,
        utilization_rate=utilization_rate,
        is_operating=is_operating,
        revenue=revenue,
        target_margin_pct=target_pct,
        metrics=metrics,
        thresholds=thresholds,
        budget=compare_budget(record, costs),
        sunk_costs=sunk_costs,
        controllable_costs=controllable_costs,
        marginal_cost_per_student=marginal_cost,
        health_score=health_score,
        health_verdict=health_verdict,
        flags=flags,
    )


def _health(
    *,
    is_operating: bool,
    utilization_rate: float,
    pct_current: float,
    pct_capacity: float,
    target_pct: float,
) -> tuple[HealthScore, str]:
    """Classify a school against its tuition-tier target."""
    if not is_operating:
        return HealthScore.GRAY, "Pre-Opening"
    if pct_capacity > target_pct * _RENEGOTIATE_MULTIPLE:
        # Even full, facilities exceed 1.5x the tier target
        return HealthScore.RED, "Renegotiate"
    if utilization_rate >= _WELL_UTILIZED and pct_current <= target_pct:
        return HealthScore.GREEN, "Keeper"
    if utilization_rate >= _WELL_UTILIZED:
        return HealthScore.YELLOW, "Fix It"
    return HealthScore.YELLOW, "Fill It"


def _collect_flags(record: SchoolRecord, costs: CategorizedCosts) -> list[str]:
    flags: list[str] = []
    if costs.annual_depreciation.total < 0:
        logger.warning(
            "School %s has negative depreciation (%.2f): total including capex "
            "is below total excluding capex",
            record.school_id,
            costs.annual_depreciation.total,
        )
        flags.append(FLAG_NEGATIVE_DEPRECIATION)
    if record.is_over_capacity:
        logger.warning(
            "School %s enrollment %d exceeds capacity %d",
            record.school_id,
            record.current_enrollment,
            record.capacity,
        )
        flags.append(FLAG_OVER_CAPACITY)
    if not record.is_operating:
        flags.append(FLAG_PRE_OPENING)
    low, high = TUITION_TIER_RANGES[record.tuition_tier]
    if not low <= record.tuition <= high:
        flags.append(FLAG_TUITION_TIER_MISMATCH)
    return flags


def _students_for_share(total: float, share_pct: float, tuition: float) -> int | None:
    """Students needed for ``total`` to be ``share_pct`` of tuition revenue."""
    if tuition <= 0 or share_pct <= 0:
        return None
    return math.ceil(total / (share_pct / 100 * tuition))


def _pct(numerator: float, denominator: float) -> float:
    return (numerator / denominator) * 100 if denominator > 0 else 0.0


def _per_sqft(amount: float, sqft: float) -> float:
    return amount / sqft if sqft > 0 else 0.0
