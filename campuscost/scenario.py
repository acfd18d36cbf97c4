"""Scenario projection: portfolio costs with every school at one utilization.

Each school's enrollment moves to ``floor(capacity * pct / 100)``. Lease,
depreciation, and landscaping stay fixed. Every other line is split by the
active expense-rule set and its variable share scales with the ratio of
scenario to current enrollment.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from campuscost.models.portfolio import ScenarioResult, SchoolProjection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from campuscost.models.costs import SchoolAnalysis
    from campuscost.models.expense import ExpenseRuleSet


def project_school(
    school: SchoolAnalysis,
    target_utilization_pct: float,
    rules: ExpenseRuleSet,
) -> SchoolProjection:
    """Recompose one school's costs at the scenario enrollment."""
    record = school.record
    costs = school.costs

    scenario_enrollment = math.floor(record.capacity * target_utilization_pct / 100)
    ratio = scenario_enrollment / max(record.current_enrollment, 1)

    fixed_fac = (
        rules.security.apply(costs.fixed_facilities.security, ratio)
        + rules.it_maintenance.apply(costs.fixed_facilities.it_maintenance, ratio)
        + costs.fixed_facilities.landscaping
    )
    variable_fac = (
        rules.janitorial.apply(costs.variable_facilities.janitorial, ratio)
        + rules.utilities.apply(costs.variable_facilities.utilities, ratio)
        + rules.repairs.apply(costs.variable_facilities.repairs, ratio)
    )
    student_services = rules.food_services.apply(
        costs.student_services.food_services, ratio
    ) + rules.transportation.apply(costs.student_services.transportation, ratio)

    total = (
        costs.lease.total
        + fixed_fac
        + variable_fac
        + student_services
        + costs.annual_depreciation.total
    )

    return SchoolProjection(
        school_id=record.school_id,
        current_enrollment=record.current_enrollment,
        scenario_enrollment=scenario_enrollment,
        enrollment_ratio=ratio,
        lease=costs.lease.total,
        fixed_facilities=fixed_fac,
        variable_facilities=variable_fac,
        student_services=student_services,
        annual_depreciation=costs.annual_depreciation.total,
        total_costs=total,
        revenue=scenario_enrollment * record.tuition,
    )


def project(
    schools: Sequence[SchoolAnalysis],
    target_utilization_pct: float,
    rules: ExpenseRuleSet,
    preset: str | None = None,
) -> ScenarioResult:
    """Project portfolio costs and revenue at ``target_utilization_pct``.

    Args:
        schools: The analysed schools to include.
        target_utilization_pct: Utilization every school is assumed to reach.
        rules: The active expense-rule set.
        preset: Name of the preset ``rules`` came from, echoed on the result.
    """
    projections = [project_school(s, target_utilization_pct, rules) for s in schools]

    total_enrollment = sum(p.scenario_enrollment for p in projections)
    total_costs = sum(p.total_costs for p in projections)
    total_revenue = sum(p.revenue for p in projections)
    total_fixed = sum(p.lease + p.annual_depreciation for p in projections)

    avg_cost_per_student = total_costs / total_enrollment if total_enrollment > 0 else 0.0
    avg_pct_of_tuition = (total_costs / total_revenue) * 100 if total_revenue > 0 else 0.0
    fixed_cost_per_student = total_fixed / total_enrollment if total_enrollment > 0 else 0.0

    current_enrollment = sum(s.record.current_enrollment for s in schools)
    current_costs = sum(s.costs.grand_total for s in schools)
    current_avg = current_costs / current_enrollment if current_enrollment > 0 else 0.0

    return ScenarioResult(
        utilization_pct=target_utilization_pct,
        preset=preset,
        total_enrollment=total_enrollment,
        total_costs=total_costs,
        total_revenue=total_revenue,
        avg_cost_per_student=avg_cost_per_student,
        avg_pct_of_tuition=avg_pct_of_tuition,
        fixed_cost_per_student=fixed_cost_per_student,
        current_avg_cost_per_student=current_avg,
        savings_vs_current=current_avg - avg_cost_per_student,
        projections=projections,
    )
