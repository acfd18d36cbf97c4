"""Break-even and target-margin enrollment search."""

from __future__ import annotations

from campuscost.models.economics import BreakevenResult
from campuscost.unit_economics import compute

# Scan up to this multiple of capacity before declaring a threshold unreachable
SCAN_CAPACITY_MULTIPLE = 2


def find_breakeven(
    tuition: float,
    capacity: int,
    facilities_total: float,
    capex_annual: float,
    target_margin_pct: float,
) -> BreakevenResult:
    """Find the smallest enrollments reaching break-even and the target margin.

    Scans ``s = 1 .. 2 * capacity`` and records the first ``s`` with
    ``margin >= 0`` and the first with ``margin_pct >= target_margin_pct``,
    stopping once both are found. A threshold never reached in the scan is
    reported as ``None``; that is a finding, not an error.
    """
    scan_limit = capacity * SCAN_CAPACITY_MULTIPLE
    breakeven_students: int | None = None
    target_students: int | None = None

    for students in range(1, scan_limit + 1):
        ue = compute(tuition, students, facilities_total, capex_annual)
        if breakeven_students is None and ue.margin >= 0:
            breakeven_students = students
        if target_students is None and ue.margin_pct >= target_margin_pct:
            target_students = students
        if breakeven_students is not None and target_students is not None:
            break

    return BreakevenResult(
        tuition=tuition,
        capacity=capacity,
        target_margin_pct=target_margin_pct,
        scan_limit=scan_limit,
        breakeven_students=breakeven_students,
        target_students=target_students,
        at_capacity=compute(tuition, capacity, facilities_total, capex_annual),
    )
