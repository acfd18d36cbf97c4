"""Per-school derived cost models: categorized costs, budget comparison, analysis."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from campuscost.models.enums import HealthScore
from campuscost.models.school import SchoolRecord


class LeaseCategory(BaseModel):
    rent: float
    total: float


class FixedFacilitiesCategory(BaseModel):
    security: float
    it_maintenance: float
    landscaping: float
    total: float


class VariableFacilitiesCategory(BaseModel):
    janitorial: float
    utilities: float
    repairs: float
    total: float


class StudentServicesCategory(BaseModel):
    food_services: float
    transportation: float
    total: float


class AnnualDepreciationCategory(BaseModel):
    depreciation: float
    total: float


class CategorizedCosts(BaseModel):
    """Six-category cost structure for one school.

    ``grand_total`` is the sum of the five annual categories. The one-time
    ``capex_buildout`` is reported alongside but never included.
    """

    lease: LeaseCategory
    fixed_facilities: FixedFacilitiesCategory
    variable_facilities: VariableFacilitiesCategory
    student_services: StudentServicesCategory
    annual_depreciation: AnnualDepreciationCategory
    capex_buildout: float
    grand_total: float
    total_excluding_lease: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def facilities_total(self) -> float:
        """Annual cost excluding depreciation (lease + facilities + student services)."""
        return (
            self.lease.total
            + self.fixed_facilities.total
            + self.variable_facilities.total
            + self.student_services.total
        )


class BudgetComparison(BaseModel):
    """Approved-model budget vs year-end actuals, per seat of capacity."""

    model_config = ConfigDict(protected_namespaces=())

    model_facilities_per_student: float
    actual_facilities_per_student: float
    facilities_delta: float
    facilities_delta_pct: float

    model_total_per_student: float
    actual_total_per_student: float
    total_delta: float
    total_delta_pct: float

    capex_buildout: float
    capex_budget: float
    capex_delta: float
    capex_delta_pct: float
    capex_per_seat: float
    depreciation_period_years: float
    annual_depreciation: float
    depreciation_per_seat: float
    total_variance: float

    # Per-seat variance split into its opex and capex parts
    facilities_opex_variance_per_seat: float
    depreciation_variance_per_seat: float


class RevenueContext(BaseModel):
    current: float
    at_capacity: float
    revenue_gap: float


class SchoolMetrics(BaseModel):
    """Per-student and per-square-foot ratios for one school."""

    cost_per_student_current: float
    cost_per_student_capacity: float
    pct_of_tuition_current: float
    pct_of_tuition_capacity: float
    total_excl_lease_per_student: float
    sqft_per_student: float
    cost_per_sqft: float
    lease_per_sqft: float
    fixed_facilities_per_sqft: float
    variable_facilities_per_sqft: float
    student_services_per_sqft: float
    depreciation_per_sqft: float
    net_facilities_fee_per_sqft: float


class FacilitiesThresholds(BaseModel):
    """Enrollment needed for facilities to fit within a share of tuition.

    Student counts are ``None`` when the school charges no tuition.
    """

    students_for_target: int | None
    students_for_20_pct: int | None
    pct_at_75_capacity: float
    pct_at_100_capacity: float


class SchoolAnalysis(BaseModel):
    """Full derived record for one school, recomputed from its raw record."""

    record: SchoolRecord
    costs: CategorizedCosts
    utilization_rate: float
    is_operating: bool
    revenue: RevenueContext
    target_margin_pct: float
    metrics: SchoolMetrics
    thresholds: FacilitiesThresholds
    budget: BudgetComparison
    sunk_costs: float
    controllable_costs: float
    marginal_cost_per_student: float
    health_score: HealthScore
    health_verdict: str
    flags: list[str] = Field(default_factory=list)

    @property
    def school_id(self) -> str:
        return self.record.school_id
