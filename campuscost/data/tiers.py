"""Tuition tier table for the campuscost engine.

Every tuition threshold the engine uses lives here so the staffing,
program, misc, and margin-target formulas cannot drift apart:

- <= $15,000: low-dollar staffing and flat programs/misc
- <= $25,000: alternative staffing and flat programs
- <  $50,000: standard (Alpha) staffing and salaries
- >= $50,000: premium (Alpha) salaries
- margin targets step at > $40,000 (10%) and >= $65,000 (20%)

Salary figures come from the approved 2HL financial models and are base
salaries before the loading factor.
"""

from __future__ import annotations

from dataclasses import dataclass

from campuscost.models.enums import FormulaTier, SchoolType, TuitionTier

LOW_DOLLAR_MAX_TUITION = 15_000.0
ALTERNATIVE_MAX_TUITION = 25_000.0
PREMIUM_MIN_TUITION = 50_000.0
MID_TARGET_MIN_TUITION = 40_000.0  # exclusive
HIGH_TARGET_MIN_TUITION = 65_000.0

# Benefits and payroll taxes on top of base salary
LOADING_FACTOR = 1.15

TIMEBACK_RATE = 0.20
TIMEBACK_FLOOR = 5_000.0
TIMEBACK_CAP = 15_000.0

# Margin targets (percent) by tuition
HIGH_TARGET_MARGIN_PCT = 20.0
MID_TARGET_MARGIN_PCT = 10.0
BASE_TARGET_MARGIN_PCT = 5.0


@dataclass(frozen=True)
class GuideRatioStaffing:
    """Staffing for the low-dollar and alternative models.

    Below ``scale_threshold`` students: one lead guide plus regular guides at
    ``small_ratio``, never fewer than ``min_small_guides`` in total. At scale:
    guides at ``large_ratio`` (up to ``large_lead_guides`` of them paid as
    leads) plus room assistants, a head of school, and an admin.
    """

    lead_salary: float
    guide_salary: float
    large_lead_guides: int
    room_assistants: int
    room_assistant_salary: float
    head_of_school_salary: float
    admin_salary: float
    small_ratio: int = 13
    large_ratio: int = 25
    min_small_guides: int = 2
    scale_threshold: int = 100


@dataclass(frozen=True)
class LeadGuideStaffing:
    """Staffing for the Alpha models: 11:1 guides with capped lead guides."""

    head_of_school_salary: float
    lead_salary: float
    guide_salary: float
    admin_salary: float
    guide_ratio: int = 11
    students_per_lead: int = 38
    max_lead_guides: int = 4
    head_of_school_threshold: int = 100


StaffingModel = GuideRatioStaffing | LeadGuideStaffing


@dataclass(frozen=True)
class ScaleCurve:
    """Per-student cost that declines linearly between two enrollment points.

    ``small`` applies at or below ``start`` students, ``large`` above ``end``.
    A flat cost uses the same value for both.
    """

    small: float
    large: float
    start: int = 50
    end: int = 100

    def at(self, students: float) -> float:
        if students <= self.start:
            return self.small
        if students <= self.end:
            return self.small - (self.small - self.large) * (students - self.start) / (
                self.end - self.start
            )
        return self.large


@dataclass(frozen=True)
class TierFormula:
    """Formula parameters for one tuition bracket."""

    tier: FormulaTier
    staffing: StaffingModel
    programs: ScaleCurve
    misc: ScaleCurve


TIER_FORMULAS: dict[FormulaTier, TierFormula] = {
    FormulaTier.LOW_DOLLAR: TierFormula(
        tier=FormulaTier.LOW_DOLLAR,
        staffing=GuideRatioStaffing(
            lead_salary=150_000.0,
            guide_salary=75_000.0,
            large_lead_guides=0,
            room_assistants=2,
            room_assistant_salary=40_000.0,
            head_of_school_salary=150_000.0,
            admin_salary=60_000.0,
        ),
        programs=ScaleCurve(small=1_250.0, large=1_250.0),
        misc=ScaleCurve(small=1_500.0, large=1_500.0),
    ),
    FormulaTier.ALTERNATIVE: TierFormula(
        tier=FormulaTier.ALTERNATIVE,
        staffing=GuideRatioStaffing(
            lead_salary=150_000.0,
            guide_salary=100_000.0,
            large_lead_guides=2,
            room_assistants=2,
            room_assistant_salary=60_000.0,
            head_of_school_salary=200_000.0,
            admin_salary=60_000.0,
        ),
        programs=ScaleCurve(small=2_500.0, large=2_500.0),
        misc=ScaleCurve(small=3_500.0, large=1_500.0),
    ),
    FormulaTier.STANDARD: TierFormula(
        tier=FormulaTier.STANDARD,
        staffing=LeadGuideStaffing(
            head_of_school_salary=200_000.0,
            lead_salary=150_000.0,
            guide_salary=100_000.0,
            admin_salary=60_000.0,
        ),
        programs=ScaleCurve(small=12_000.0, large=8_500.0),
        misc=ScaleCurve(small=3_500.0, large=1_500.0),
    ),
    FormulaTier.PREMIUM: TierFormula(
        tier=FormulaTier.PREMIUM,
        staffing=LeadGuideStaffing(
            head_of_school_salary=300_000.0,
            lead_salary=200_000.0,
            guide_salary=120_000.0,
            admin_salary=75_000.0,
        ),
        programs=ScaleCurve(small=12_000.0, large=8_500.0),
        misc=ScaleCurve(small=3_500.0, large=1_500.0),
    ),
}


def formula_tier_for(tuition: float) -> FormulaTier:
    """Select the formula bracket for a tuition amount."""
    if tuition <= LOW_DOLLAR_MAX_TUITION:
        return FormulaTier.LOW_DOLLAR
    if tuition <= ALTERNATIVE_MAX_TUITION:
        return FormulaTier.ALTERNATIVE
    if tuition < PREMIUM_MIN_TUITION:
        return FormulaTier.STANDARD
    return FormulaTier.PREMIUM


def tier_formula_for(tuition: float) -> TierFormula:
    return TIER_FORMULAS[formula_tier_for(tuition)]


# ---------------------------------------------------------------------------
# Capex budget rates: $ per capacity seat per year of depreciation
# ---------------------------------------------------------------------------

CAPEX_BUDGET_RATE_PER_SEAT: dict[SchoolType, float] = {
    SchoolType.ALPHA_SCHOOL: 1_000.0,
    SchoolType.GROWTH_ALPHA: 750.0,
    SchoolType.MICROSCHOOL: 500.0,
    SchoolType.ALTERNATIVE: 500.0,
    SchoolType.LOW_DOLLAR: 500.0,
}

DEFAULT_DEPRECIATION_YEARS = 10.0


# ---------------------------------------------------------------------------
# Segment labels and declared tuition ranges
# ---------------------------------------------------------------------------

SCHOOL_TYPE_LABELS: dict[SchoolType, str] = {
    SchoolType.ALPHA_SCHOOL: "Alpha School",
    SchoolType.GROWTH_ALPHA: "Growth Alpha",
    SchoolType.MICROSCHOOL: "MicroSchool",
    SchoolType.ALTERNATIVE: "Alternative Models",
    SchoolType.LOW_DOLLAR: "Low Cost Models",
}

TUITION_TIER_LABELS: dict[TuitionTier, str] = {
    TuitionTier.PREMIUM: "$50K+",
    TuitionTier.STANDARD: "$35K-$40K",
    TuitionTier.VALUE: "$20K-$25K",
    TuitionTier.ECONOMY: "<$20K",
}

TUITION_TIER_RANGES: dict[TuitionTier, tuple[float, float]] = {
    TuitionTier.PREMIUM: (45_000.0, 999_999.0),
    TuitionTier.STANDARD: (35_000.0, 44_999.0),
    TuitionTier.VALUE: (20_000.0, 34_999.0),
    TuitionTier.ECONOMY: (0.0, 19_999.0),
}
