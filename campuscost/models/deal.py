"""New-site deal evaluation models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DealInputs(BaseModel):
    """Terms of a prospective school site.

    ``fixed_facilities_pct`` is the fixed facilities cost expressed as a
    percent of the lease.
    """

    name: str = ""
    lease: float = Field(ge=0)
    tuition: float = Field(ge=0)
    capacity: int = Field(gt=0)
    sqft: float = Field(ge=0, default=0.0)
    fixed_facilities_pct: float = Field(ge=0, default=25.0)
    capex_buildout: float = Field(ge=0, default=0.0)
    amort_years: float = Field(gt=0, default=5.0)
    lease_term_years: float = Field(ge=0, default=5.0)
    early_walk_years: float = Field(ge=0, default=2.0)


class DealScenarioRow(BaseModel):
    """Fixed-cost coverage at one fill level of the new site."""

    fill_pct: float
    students: int
    revenue: float
    cost_per_student: float
    pct_of_tuition: float
    margin: float


class DealEvaluation(BaseModel):
    """Fixed-cost commitment, fill scenarios, and portfolio impact of a deal."""

    inputs: DealInputs

    annual_depreciation: float
    fixed_facilities_cost: float
    total_fixed: float
    total_commitment: float
    early_walk_exposure: float
    lease_per_sqft: float

    target_margin_pct: float
    break_even_students: int | None
    can_reach_target: bool

    scenarios: list[DealScenarioRow]

    new_portfolio_grand_total: float
    new_portfolio_revenue_at_capacity: float
    new_portfolio_capacity: int
    new_facilities_pct_at_capacity: float
