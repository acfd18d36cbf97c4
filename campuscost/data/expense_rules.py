"""Expense-rule presets: fixed/variable splits for each semi-variable cost line.

Two presets ship with the engine:

- ``dashboard``: the splits the facilities dashboard was originally built on.
- ``expense-report``: the splits from the expense report workbook, which
  treats security, IT, and janitorial as more variable.

The active preset is always passed in by the caller; nothing here is global
mutable state beyond the default registry's fixed table.
"""

from __future__ import annotations

from campuscost.exceptions import UnknownPresetError
from campuscost.models.enums import CostBehavior
from campuscost.models.expense import CostSplit, ExpenseRule, ExpenseRuleSet

DEFAULT_PRESET = "dashboard"

DASHBOARD_RULES = ExpenseRuleSet(
    security=CostSplit(fixed=0.90, variable=0.10),
    it_maintenance=CostSplit(fixed=0.85, variable=0.15),
    landscaping=CostSplit(fixed=1.00, variable=0.00),
    janitorial=CostSplit(fixed=0.60, variable=0.40),
    utilities=CostSplit(fixed=0.50, variable=0.50),
    repairs=CostSplit(fixed=0.60, variable=0.40),
    food_services=CostSplit(fixed=0.20, variable=0.80),
    transportation=CostSplit(fixed=0.30, variable=0.70),
)

EXPENSE_REPORT_RULES = ExpenseRuleSet(
    security=CostSplit(fixed=0.80, variable=0.20),
    it_maintenance=CostSplit(fixed=0.80, variable=0.20),
    landscaping=CostSplit(fixed=1.00, variable=0.00),
    janitorial=CostSplit(fixed=0.80, variable=0.20),
    utilities=CostSplit(fixed=0.60, variable=0.40),
    repairs=CostSplit(fixed=0.70, variable=0.30),
    food_services=CostSplit(fixed=0.20, variable=0.80),
    transportation=CostSplit(fixed=0.30, variable=0.70),
)

PRESET_LABELS: dict[str, str] = {
    "dashboard": "Dashboard Original",
    "expense-report": "Expense Report Splits",
}


class ExpenseRuleRegistry:
    """Named expense-rule presets.

    Wraps an in-memory table of presets and raises
    :class:`UnknownPresetError` for names it does not hold.
    """

    def __init__(self, presets: dict[str, ExpenseRuleSet] | None = None) -> None:
        if presets is None:
            presets = {
                "dashboard": DASHBOARD_RULES,
                "expense-report": EXPENSE_REPORT_RULES,
            }
        self._presets = dict(presets)

    def get_preset(self, name: str) -> ExpenseRuleSet:
        try:
            return self._presets[name]
        except KeyError:
            raise UnknownPresetError(name, list(self._presets)) from None

    def register(self, name: str, rules: ExpenseRuleSet) -> None:
        self._presets[name] = rules

    def names(self) -> list[str]:
        return list(self._presets)

    def __contains__(self, name: object) -> bool:
        return name in self._presets


_DEFAULT_REGISTRY = ExpenseRuleRegistry()


def get_preset(name: str) -> ExpenseRuleSet:
    """Look up a built-in preset by name.

    Raises:
        UnknownPresetError: If ``name`` is not a built-in preset.
    """
    return _DEFAULT_REGISTRY.get_preset(name)


def get_expense_rules(rules: ExpenseRuleSet) -> list[ExpenseRule]:
    """Describe how each cost line behaves under a rule set.

    Rent and depreciation are always fully fixed and are listed alongside
    the configurable lines.
    """
    return [
        ExpenseRule(
            id="rent",
            name="Rent",
            category="lease",
            cost_behavior=CostBehavior.FIXED,
            fixed_percent=1.0,
            variable_percent=0.0,
            description="Lease commitment, locked in on day 1",
        ),
        _rule("security", "Security Services", "fixed-facilities",
              CostBehavior.FIXED, rules.security,
              "Base security required regardless of enrollment"),
        _rule("it-maintenance", "IT Maintenance / Internet", "fixed-facilities",
              CostBehavior.FIXED, rules.it_maintenance,
              "Core infrastructure fixed; device costs scale slightly"),
        _rule("landscaping", "Landscaping", "fixed-facilities",
              CostBehavior.FIXED, rules.landscaping,
              "Grounds maintenance driven by space, not students"),
        _rule("janitorial", "Janitorial / Toiletries", "variable-facilities",
              CostBehavior.SEMI_VARIABLE, rules.janitorial,
              "Base cleaning fixed; supplies scale with occupancy"),
        _rule("utilities", "Utilities", "variable-facilities",
              CostBehavior.SEMI_VARIABLE, rules.utilities,
              "Base heating/cooling fixed; marginal usage scales"),
        _rule("repairs", "Repairs / Maintenance", "variable-facilities",
              CostBehavior.SEMI_VARIABLE, rules.repairs,
              "Building maintenance mostly fixed; wear increases with usage"),
        _rule("food-services", "Food Services", "student-services",
              CostBehavior.VARIABLE, rules.food_services,
              "Meal programs scale directly with student count"),
        _rule("transportation", "Transportation", "student-services",
              CostBehavior.VARIABLE, rules.transportation,
              "Bus routes and transport services scale with students"),
        ExpenseRule(
            id="depreciation",
            name="Depreciation / Amortization",
            category="annual-depreciation",
            cost_behavior=CostBehavior.FIXED,
            fixed_percent=1.0,
            variable_percent=0.0,
            description="Annualized capex depreciation, a fully fixed sunk cost",
        ),
    ]


def _rule(
    rule_id: str,
    name: str,
    category: str,
    behavior: CostBehavior,
    split: CostSplit,
    description: str,
) -> ExpenseRule:
    return ExpenseRule(
        id=rule_id,
        name=name,
        category=category,
        cost_behavior=behavior,
        fixed_percent=split.fixed,
        variable_percent=split.variable,
        description=description,
    )
