"""Full unit economics: revenue minus every cost component equals margin."""

from __future__ import annotations

from campuscost.formulas import (
    misc_per_student,
    programs_per_student,
    staffing_cost,
    timeback,
)
from campuscost.models.economics import UnitEconomicsResult


def compute(
    tuition: float,
    students: int,
    facilities_total: float,
    capex_annual: float,
) -> UnitEconomicsResult:
    """Compose staffing, facilities, capex, programs, misc, and timeback.

    Args:
        tuition: Annual tuition per student.
        students: Enrollment to evaluate at.
        facilities_total: Annual facilities cost excluding depreciation.
        capex_annual: Annualized capex (depreciation).

    Returns:
        A UnitEconomicsResult. Per-student figures divide by
        ``max(students, 1)`` and ``margin_pct`` is 0 when revenue is 0.
    """
    revenue = tuition * students
    staffing = staffing_cost(tuition, students)
    programs = programs_per_student(tuition, students) * students
    misc = misc_per_student(tuition, students) * students
    timeback_total = timeback(tuition) * students

    total_costs = staffing + facilities_total + capex_annual + programs + misc + timeback_total
    margin = revenue - total_costs
    divisor = max(students, 1)

    return UnitEconomicsResult(
        students=students,
        tuition=tuition,
        revenue=revenue,
        staffing=staffing,
        staffing_per_student=staffing / divisor,
        facilities=facilities_total,
        facilities_per_student=facilities_total / divisor,
        capex_annual=capex_annual,
        capex_per_student=capex_annual / divisor,
        programs=programs,
        programs_per_student=programs / divisor,
        misc=misc,
        misc_per_student=misc / divisor,
        timeback=timeback_total,
        timeback_per_student=timeback_total / divisor,
        total_costs=total_costs,
        total_per_student=total_costs / divisor,
        margin=margin,
        margin_per_student=margin / divisor,
        margin_pct=(margin / revenue) * 100 if revenue > 0 else 0.0,
    )
