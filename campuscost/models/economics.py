"""Unit economics output models: full revenue/cost/margin records."""

from __future__ import annotations

from pydantic import BaseModel


class UnitEconomicsResult(BaseModel):
    """Revenue, every cost component, and margin at one enrollment level.

    Per-student fields divide by ``max(students, 1)``; for a school with no
    students they are defined but not meaningful, so check ``students``.
    """

    students: int
    tuition: float
    revenue: float
    staffing: float
    staffing_per_student: float
    facilities: float
    facilities_per_student: float
    capex_annual: float
    capex_per_student: float
    programs: float
    programs_per_student: float
    misc: float
    misc_per_student: float
    timeback: float
    timeback_per_student: float
    total_costs: float
    total_per_student: float
    margin: float
    margin_per_student: float
    margin_pct: float


class BreakevenResult(BaseModel):
    """Outcome of the enrollment scan for break-even and target margin.

    ``breakeven_students`` / ``target_students`` are ``None`` when the
    threshold is not reached anywhere in ``1..scan_limit``.
    """

    tuition: float
    capacity: int
    target_margin_pct: float
    scan_limit: int
    breakeven_students: int | None
    target_students: int | None
    at_capacity: UnitEconomicsResult

    @property
    def breakeven_reachable(self) -> bool:
        return self.breakeven_students is not None

    @property
    def target_reachable(self) -> bool:
        return self.target_students is not None

    @property
    def breaks_even_within_capacity(self) -> bool:
        return self.breakeven_students is not None and self.breakeven_students <= self.capacity

    @property
    def meets_target_within_capacity(self) -> bool:
        return self.target_students is not None and self.target_students <= self.capacity


class MarginComparison(BaseModel):
    """Margin at capacity under actual costs vs the approved financial model."""

    school_id: str
    target_margin_pct: float
    actual: UnitEconomicsResult
    approved: UnitEconomicsResult

    @property
    def actual_margin_pct(self) -> float:
        return self.actual.margin_pct

    @property
    def approved_margin_pct(self) -> float:
        return self.approved.margin_pct

    @property
    def meets_target(self) -> bool:
        return self.actual.margin_pct >= self.target_margin_pct
