"""Tests for the staffing, program, misc, timeback, and margin-target formulas."""

from __future__ import annotations

import pytest

from campuscost.data.tiers import formula_tier_for
from campuscost.formulas import (
    misc_per_student,
    programs_per_student,
    staffing_cost,
    target_margin_pct,
    timeback,
)
from campuscost.models.enums import FormulaTier

# ---------------------------------------------------------------------------
# Tier selection
# ---------------------------------------------------------------------------


class TestFormulaTier:
    @pytest.mark.parametrize(
        ("tuition", "tier"),
        [
            (10_000.0, FormulaTier.LOW_DOLLAR),
            (15_000.0, FormulaTier.LOW_DOLLAR),
            (15_001.0, FormulaTier.ALTERNATIVE),
            (25_000.0, FormulaTier.ALTERNATIVE),
            (25_001.0, FormulaTier.STANDARD),
            (49_999.0, FormulaTier.STANDARD),
            (50_000.0, FormulaTier.PREMIUM),
            (65_000.0, FormulaTier.PREMIUM),
        ],
    )
    def test_bracket_boundaries(self, tuition: float, tier: FormulaTier) -> None:
        assert formula_tier_for(tuition) == tier


# ---------------------------------------------------------------------------
# Staffing
# ---------------------------------------------------------------------------


class TestStaffingCost:
    def test_standard_61_students(self) -> None:
        """6 guides (2 leads, 4 regular) plus admin, no head of school.

        60,000*1.15 + 2*150,000*1.15 + 4*100,000*1.15 = 874,000
        """
        assert staffing_cost(40_000.0, 61) == pytest.approx(874_000.0, abs=0.005)

    def test_premium_adds_head_of_school_at_100(self) -> None:
        below = staffing_cost(50_000.0, 99)
        at = staffing_cost(50_000.0, 100)
        # Head of school 300,000*1.15 plus one more guide 120,000*1.15
        assert at - below == pytest.approx(345_000.0 + 138_000.0)

    def test_lead_guides_capped_at_four(self) -> None:
        # 200 students: 19 guides, leads capped at 4, head of school present
        expected = (75_000 + 300_000 + 4 * 200_000 + 15 * 120_000) * 1.15
        assert staffing_cost(50_000.0, 200) == pytest.approx(expected)

    def test_lead_guide_model_always_has_one_lead(self) -> None:
        # 5 students: 1 guide, and it is the lead
        assert staffing_cost(40_000.0, 5) == pytest.approx((60_000 + 150_000) * 1.15)

    def test_low_dollar_small_school_minimum_two_guides(self) -> None:
        # 20 students: max(2, ceil(20/13)) = 2 guides, one of them the lead
        assert staffing_cost(15_000.0, 20) == pytest.approx((150_000 + 75_000) * 1.15)

    def test_low_dollar_small_school_scales_at_13_to_1(self) -> None:
        # 50 students: ceil(50/13) = 4 guides
        assert staffing_cost(15_000.0, 50) == pytest.approx((150_000 + 3 * 75_000) * 1.15)

    def test_low_dollar_at_scale(self) -> None:
        # 100 students: 4 guides at 25:1, no lead guides, 2 assistants, HoS, admin
        expected = (4 * 75_000 + 2 * 40_000 + 150_000 + 60_000) * 1.15
        assert staffing_cost(15_000.0, 100) == pytest.approx(expected)

    def test_alternative_at_scale_pays_two_leads(self) -> None:
        expected = (2 * 150_000 + 2 * 100_000 + 2 * 60_000 + 200_000 + 60_000) * 1.15
        assert staffing_cost(25_000.0, 100) == pytest.approx(expected)

    def test_low_dollar_switches_to_scale_ratio_at_100(self) -> None:
        # 99 students still staff at 13:1 (8 guides); 100 move to 25:1 plus support
        assert staffing_cost(15_000.0, 99) == pytest.approx((150_000 + 7 * 75_000) * 1.15)
        assert staffing_cost(15_000.0, 100) < staffing_cost(15_000.0, 99)


# ---------------------------------------------------------------------------
# Programs / misc
# ---------------------------------------------------------------------------


class TestProgramsAndMisc:
    def test_alpha_programs_decline_between_50_and_100(self) -> None:
        assert programs_per_student(40_000.0, 50) == pytest.approx(12_000.0)
        assert programs_per_student(40_000.0, 75) == pytest.approx(10_250.0)
        assert programs_per_student(40_000.0, 100) == pytest.approx(8_500.0)
        assert programs_per_student(40_000.0, 300) == pytest.approx(8_500.0)

    def test_low_dollar_flat(self) -> None:
        for students in (1, 50, 75, 100, 400):
            assert programs_per_student(15_000.0, students) == pytest.approx(1_250.0)
            assert misc_per_student(15_000.0, students) == pytest.approx(1_500.0)

    def test_alternative_programs_flat_misc_declines(self) -> None:
        assert programs_per_student(20_000.0, 10) == pytest.approx(2_500.0)
        assert programs_per_student(20_000.0, 200) == pytest.approx(2_500.0)
        assert misc_per_student(20_000.0, 10) == pytest.approx(3_500.0)
        assert misc_per_student(20_000.0, 200) == pytest.approx(1_500.0)

    def test_alpha_misc_midpoint(self) -> None:
        assert misc_per_student(65_000.0, 75) == pytest.approx(2_500.0)


# ---------------------------------------------------------------------------
# Timeback / targets
# ---------------------------------------------------------------------------


class TestTimebackAndTargets:
    @pytest.mark.parametrize(
        ("tuition", "expected"),
        [
            (10_000.0, 5_000.0),
            (25_000.0, 5_000.0),
            (40_000.0, 8_000.0),
            (50_000.0, 10_000.0),
            (75_000.0, 15_000.0),
            (100_000.0, 15_000.0),
        ],
    )
    def test_timeback_floor_and_cap(self, tuition: float, expected: float) -> None:
        assert timeback(tuition) == pytest.approx(expected)

    @pytest.mark.parametrize(
        ("tuition", "expected"),
        [
            (15_000.0, 5.0),
            (40_000.0, 5.0),
            (40_001.0, 10.0),
            (50_000.0, 10.0),
            (64_999.0, 10.0),
            (65_000.0, 20.0),
        ],
    )
    def test_target_margin_steps(self, tuition: float, expected: float) -> None:
        assert target_margin_pct(tuition) == expected
