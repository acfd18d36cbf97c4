"""Tests for full unit economics."""

from __future__ import annotations

import random

import pytest

from campuscost.formulas import staffing_cost, timeback
from campuscost.unit_economics import compute


class TestCompute:
    def test_components_at_61_students(self) -> None:
        ue = compute(40_000.0, 61, 500_000.0, 100_000.0)

        assert ue.revenue == pytest.approx(2_440_000.0)
        assert ue.staffing == pytest.approx(874_000.0, abs=0.005)
        assert ue.facilities == pytest.approx(500_000.0)
        assert ue.capex_annual == pytest.approx(100_000.0)
        # 61 students is 11/50 of the way down the 50-100 scale curves
        assert ue.programs == pytest.approx(11_230.0 * 61)
        assert ue.misc == pytest.approx(3_060.0 * 61)
        assert ue.timeback == pytest.approx(8_000.0 * 61)

    def test_per_student_figures(self) -> None:
        ue = compute(50_000.0, 100, 1_000_000.0, 200_000.0)

        assert ue.facilities_per_student == pytest.approx(10_000.0)
        assert ue.capex_per_student == pytest.approx(2_000.0)
        assert ue.programs_per_student == pytest.approx(8_500.0)
        assert ue.misc_per_student == pytest.approx(1_500.0)
        assert ue.timeback_per_student == pytest.approx(10_000.0)
        assert ue.total_per_student == pytest.approx(ue.total_costs / 100)
        assert ue.margin_per_student == pytest.approx(ue.margin / 100)

    def test_zero_students(self) -> None:
        ue = compute(40_000.0, 0, 300_000.0, 50_000.0)

        assert ue.revenue == 0.0
        assert ue.margin_pct == 0.0
        assert ue.programs == 0.0
        assert ue.timeback == 0.0
        # Fixed staffing and facilities are still incurred
        assert ue.total_costs == pytest.approx(staffing_cost(40_000.0, 0) + 350_000.0)
        assert ue.facilities_per_student == pytest.approx(300_000.0)

    def test_margin_pct_sign_follows_margin(self) -> None:
        losing = compute(15_000.0, 10, 2_000_000.0, 0.0)
        assert losing.margin < 0
        assert losing.margin_pct < 0


class TestIdentities:
    """Margin identity over a seeded sample of inputs."""

    def test_margin_is_revenue_minus_costs(self) -> None:
        rng = random.Random(20240801)
        for _ in range(300):
            tuition = rng.uniform(5_000.0, 90_000.0)
            students = rng.randint(0, 400)
            facilities = rng.uniform(0.0, 5_000_000.0)
            capex = rng.uniform(0.0, 500_000.0)

            ue = compute(tuition, students, facilities, capex)

            component_sum = (
                ue.staffing + ue.facilities + ue.capex_annual + ue.programs + ue.misc + ue.timeback
            )
            assert ue.total_costs == pytest.approx(component_sum)
            assert ue.margin == pytest.approx(ue.revenue - ue.total_costs)
            assert ue.revenue == pytest.approx(tuition * students)
            assert ue.timeback == pytest.approx(timeback(tuition) * students)
            if ue.revenue > 0:
                assert ue.margin_pct == pytest.approx(ue.margin / ue.revenue * 100)
            else:
                assert ue.margin_pct == 0.0
