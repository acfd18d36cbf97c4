"""Enums for the campuscost domain models.

String values match the tags used in the source school data sheets so
records can be loaded from JSON without translation.
"""

from enum import StrEnum


class SchoolType(StrEnum):
    """School model families in the portfolio."""

    ALPHA_SCHOOL = "alpha-school"
    GROWTH_ALPHA = "growth-alpha"
    MICROSCHOOL = "microschool"
    ALTERNATIVE = "alternative"
    LOW_DOLLAR = "low-dollar"


class TuitionTier(StrEnum):
    """Pricing bracket tag carried on each school record."""

    PREMIUM = "premium"
    STANDARD = "standard"
    VALUE = "value"
    ECONOMY = "economy"


class FormulaTier(StrEnum):
    """Tuition bracket that selects staffing, program and misc formulas."""

    LOW_DOLLAR = "low_dollar"
    ALTERNATIVE = "alternative"
    STANDARD = "standard"
    PREMIUM = "premium"


class HealthScore(StrEnum):
    """Traffic-light classification of a school's facilities position."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    GRAY = "gray"


class CostBehavior(StrEnum):
    """How a cost line responds to enrollment changes."""

    FIXED = "fixed"
    SEMI_VARIABLE = "semi-variable"
    VARIABLE = "variable"


class InsightCategory(StrEnum):
    """Kind of portfolio insight."""

    FIXED_COST_WARNING = "fixed-cost-warning"
    OPPORTUNITY = "opportunity"
    INFO = "info"
