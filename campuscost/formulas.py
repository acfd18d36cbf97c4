"""Staffing, program, misc, and timeback cost formulas.

All formulas come from the approved financial models and are selected by
tuition through the tier table in :mod:`campuscost.data.tiers`. Staffing is a
step function of enrollment: guide counts always round up, and at 100
students the Alpha models add a head of school, which produces a real dip in
margin right at that threshold.
"""

from __future__ import annotations

import math

from campuscost.data.tiers import (
    BASE_TARGET_MARGIN_PCT,
    HIGH_TARGET_MARGIN_PCT,
    HIGH_TARGET_MIN_TUITION,
    LOADING_FACTOR,
    MID_TARGET_MARGIN_PCT,
    MID_TARGET_MIN_TUITION,
    TIMEBACK_CAP,
    TIMEBACK_FLOOR,
    TIMEBACK_RATE,
    GuideRatioStaffing,
    LeadGuideStaffing,
    tier_formula_for,
)


def staffing_cost(tuition: float, students: int) -> float:
    """Annual loaded staffing cost for a school at ``students`` enrollment."""
    model = tier_formula_for(tuition).staffing
    if isinstance(model, LeadGuideStaffing):
        return _lead_guide_staffing(model, students)
    return _guide_ratio_staffing(model, students)


def _guide_ratio_staffing(model: GuideRatioStaffing, students: int) -> float:
    if students < model.scale_threshold:
        total_guides = max(model.min_small_guides, math.ceil(students / model.small_ratio))
        lead_guides = 1
        regular_guides = total_guides - lead_guides
        return (
            lead_guides * model.lead_salary + regular_guides * model.guide_salary
        ) * LOADING_FACTOR

    total_guides = math.ceil(students / model.large_ratio)
    lead_guides = min(model.large_lead_guides, total_guides)
    regular_guides = max(0, total_guides - lead_guides)
    guide_cost = lead_guides * model.lead_salary + regular_guides * model.guide_salary
    other_headcount = (
        model.room_assistants * model.room_assistant_salary
        + model.head_of_school_salary
        + model.admin_salary
    )
    return (guide_cost + other_headcount) * LOADING_FACTOR


def _lead_guide_staffing(model: LeadGuideStaffing, students: int) -> float:
    # Admin is always 1
    cost = model.admin_salary * LOADING_FACTOR

    if students >= model.head_of_school_threshold:
        cost += model.head_of_school_salary * LOADING_FACTOR

    total_guides = math.ceil(students / model.guide_ratio)
    lead_guides = min(
        model.max_lead_guides, max(1, math.ceil(students / model.students_per_lead))
    )
    regular_guides = max(0, total_guides - lead_guides)

    cost += lead_guides * model.lead_salary * LOADING_FACTOR
    cost += regular_guides * model.guide_salary * LOADING_FACTOR
    return cost


def programs_per_student(tuition: float, students: int) -> float:
    """Per-student program cost; declines with scale for the Alpha tiers."""
    return tier_formula_for(tuition).programs.at(students)


def misc_per_student(tuition: float, students: int) -> float:
    """Per-student misc cost; flat for low-dollar, declining with scale otherwise."""
    return tier_formula_for(tuition).misc.at(students)


def timeback(tuition: float) -> float:
    """Per-student Timeback fee: 20% of tuition, floored at $5K and capped at $15K."""
    return min(TIMEBACK_CAP, max(TIMEBACK_FLOOR, tuition * TIMEBACK_RATE))


def target_margin_pct(tuition: float) -> float:
    """Target margin percent for a tuition level (20 / 10 / 5)."""
    if tuition >= HIGH_TARGET_MIN_TUITION:
        return HIGH_TARGET_MARGIN_PCT
    if tuition > MID_TARGET_MIN_TUITION:
        return MID_TARGET_MARGIN_PCT
    return BASE_TARGET_MARGIN_PCT
