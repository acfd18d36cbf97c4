"""What-if evaluation of a prospective school site.

A deal is judged on its fixed costs alone: lease, fixed facilities (a
percent of the lease), and buildout depreciated over ``amort_years``. The
result shows the commitment and early-exit exposure, coverage at 25/50/75/100%
fill, and how the site would move the portfolio's facilities share of
at-capacity revenue.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from campuscost.formulas import target_margin_pct
from campuscost.models.deal import DealEvaluation, DealInputs, DealScenarioRow

if TYPE_CHECKING:
    from campuscost.models.portfolio import PortfolioSummary

FILL_LEVELS = (0.25, 0.50, 0.75, 1.00)


def evaluate_deal(
    inputs: DealInputs,
    summary: PortfolioSummary | None = None,
) -> DealEvaluation:
    """Evaluate a site's fixed-cost economics against an existing portfolio.

    Args:
        inputs: Lease, tuition, capacity, and buildout terms of the site.
        summary: The current portfolio. Without one the impact figures
            describe the site on its own.
    """
    annual_depreciation = inputs.capex_buildout / inputs.amort_years
    fixed_facilities_cost = inputs.lease * (inputs.fixed_facilities_pct / 100)
    total_fixed = inputs.lease + fixed_facilities_cost + annual_depreciation

    target_pct = target_margin_pct(inputs.tuition)
    target_revenue_per_student = target_pct / 100 * inputs.tuition
    if target_revenue_per_student > 0:
        break_even_students: int | None = math.ceil(total_fixed / target_revenue_per_student)
    else:
        break_even_students = None

    current_total = summary.grand_total if summary is not None else 0.0
    current_revenue = summary.total_revenue_at_capacity if summary is not None else 0.0
    current_capacity = summary.total_capacity if summary is not None else 0

    new_total = current_total + total_fixed
    new_revenue = current_revenue + inputs.capacity * inputs.tuition

    return DealEvaluation(
        inputs=inputs,
        annual_depreciation=annual_depreciation,
        fixed_facilities_cost=fixed_facilities_cost,
        total_fixed=total_fixed,
        total_commitment=inputs.lease * inputs.lease_term_years + inputs.capex_buildout,
        early_walk_exposure=inputs.lease * inputs.early_walk_years + inputs.capex_buildout,
        lease_per_sqft=inputs.lease / inputs.sqft if inputs.sqft > 0 else 0.0,
        target_margin_pct=target_pct,
        break_even_students=break_even_students,
        can_reach_target=(
            break_even_students is not None and break_even_students <= inputs.capacity
        ),
        scenarios=[_scenario(fill, inputs, total_fixed) for fill in FILL_LEVELS],
        new_portfolio_grand_total=new_total,
        new_portfolio_revenue_at_capacity=new_revenue,
        new_portfolio_capacity=current_capacity + inputs.capacity,
        new_facilities_pct_at_capacity=(new_total / new_revenue) * 100 if new_revenue > 0 else 0.0,
    )


def _scenario(fill: float, inputs: DealInputs, total_fixed: float) -> DealScenarioRow:
    students = math.floor(inputs.capacity * fill)
    revenue = students * inputs.tuition
    has_students = students > 0 and revenue > 0
    return DealScenarioRow(
        fill_pct=fill * 100,
        students=students,
        revenue=revenue,
        cost_per_student=total_fixed / students if students > 0 else 0.0,
        pct_of_tuition=(total_fixed / revenue) * 100 if has_students else 0.0,
        margin=revenue - total_fixed,
    )
