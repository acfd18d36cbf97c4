"""Portfolio-level output models: summaries, segments, scenarios, insights."""

from __future__ import annotations

from pydantic import BaseModel, Field

from campuscost.models.enums import InsightCategory


class SubcategoryAmount(BaseModel):
    name: str
    amount: float


class CategoryShare(BaseModel):
    """One cost category's portfolio total and share of the grand total."""

    category: str
    amount: float
    pct_of_total: float
    subcategories: list[SubcategoryAmount] = Field(default_factory=list)


class HealthCounts(BaseModel):
    green: int = 0
    yellow: int = 0
    red: int = 0
    pre_opening: int = 0


class PortfolioSummary(BaseModel):
    """Sums and weighted averages across a set of analysed schools."""

    total_schools: int
    total_enrollment: int
    total_capacity: int
    avg_utilization: float

    total_lease: float
    total_fixed_facilities: float
    total_variable_facilities: float
    total_student_services: float
    total_annual_depreciation: float
    total_capex_buildout: float
    grand_total: float
    total_excluding_lease: float

    avg_cost_per_student: float
    avg_excl_lease_per_student: float

    total_revenue_current: float
    total_revenue_at_capacity: float
    total_revenue_gap: float
    facilities_pct_of_revenue: float

    total_sunk_costs: float
    total_controllable_costs: float
    avg_marginal_cost: float

    total_sqft: float
    total_net_facilities_fees: float
    avg_lease_per_sqft: float
    avg_fixed_facilities_per_sqft: float
    avg_variable_facilities_per_sqft: float
    avg_student_services_per_sqft: float
    avg_depreciation_per_sqft: float
    avg_total_cost_per_sqft: float
    avg_net_facilities_fee_per_sqft: float

    schools_by_health: HealthCounts
    total_budget_variance: float

    total_capex_budget: float
    total_capex_delta: float
    total_capex_delta_pct: float

    category_breakdown: list[CategoryShare]


class SegmentSummary(BaseModel):
    """Aggregate of the schools sharing one segment key."""

    segment: str
    school_count: int
    total_enrollment: int
    total_capacity: int
    utilization_pct: float
    total_costs: float
    avg_cost_per_student: float
    avg_pct_of_tuition: float
    school_ids: list[str]


class SchoolProjection(BaseModel):
    """One school's costs recomposed at the scenario enrollment."""

    school_id: str
    current_enrollment: int
    scenario_enrollment: int
    enrollment_ratio: float
    lease: float
    fixed_facilities: float
    variable_facilities: float
    student_services: float
    annual_depreciation: float
    total_costs: float
    revenue: float


class ScenarioResult(BaseModel):
    """Portfolio costs and revenue with every school at one utilization level."""

    utilization_pct: float
    preset: str | None = None
    total_enrollment: int
    total_costs: float
    total_revenue: float
    avg_cost_per_student: float
    avg_pct_of_tuition: float
    fixed_cost_per_student: float
    current_avg_cost_per_student: float
    savings_vs_current: float
    projections: list[SchoolProjection] = Field(default_factory=list)


class Insight(BaseModel):
    """A structured observation about the portfolio's cost position."""

    id: str
    category: InsightCategory
    title: str
    metric: float
    unit: str
    share_pct: float | None = None
    open_seats: int | None = None
