"""Tests for expense-rule presets and the cost behaviour table."""

from __future__ import annotations

import pytest

from campuscost.data.expense_rules import (
    DASHBOARD_RULES,
    DEFAULT_PRESET,
    EXPENSE_REPORT_RULES,
    ExpenseRuleRegistry,
    get_expense_rules,
    get_preset,
)
from campuscost.exceptions import UnknownPresetError
from campuscost.models.enums import CostBehavior
from campuscost.models.expense import CostSplit, ExpenseRuleSet


class TestPresets:
    def test_builtin_presets(self) -> None:
        assert get_preset("dashboard") is DASHBOARD_RULES
        assert get_preset("expense-report") is EXPENSE_REPORT_RULES
        assert DEFAULT_PRESET == "dashboard"

    def test_dashboard_splits(self) -> None:
        assert DASHBOARD_RULES.security.fixed == pytest.approx(0.90)
        assert DASHBOARD_RULES.janitorial.fixed == pytest.approx(0.60)
        assert DASHBOARD_RULES.utilities.variable == pytest.approx(0.50)
        assert DASHBOARD_RULES.food_services.variable == pytest.approx(0.80)

    def test_expense_report_treats_janitorial_as_fixed(self) -> None:
        assert EXPENSE_REPORT_RULES.janitorial.fixed == pytest.approx(0.80)
        assert EXPENSE_REPORT_RULES.repairs.fixed == pytest.approx(0.70)

    def test_landscaping_fully_fixed_in_both(self) -> None:
        assert DASHBOARD_RULES.landscaping.variable == 0.0
        assert EXPENSE_REPORT_RULES.landscaping.variable == 0.0

    def test_unknown_preset(self) -> None:
        with pytest.raises(UnknownPresetError) as exc_info:
            get_preset("quarterly")

        assert exc_info.value.name == "quarterly"
        assert exc_info.value.available == ["dashboard", "expense-report"]
        assert "quarterly" in str(exc_info.value)


class TestRegistry:
    def test_register_custom_preset(self) -> None:
        all_fixed = CostSplit(fixed=1.0, variable=0.0)
        rules = ExpenseRuleSet(
            security=all_fixed,
            it_maintenance=all_fixed,
            landscaping=all_fixed,
            janitorial=all_fixed,
            utilities=all_fixed,
            repairs=all_fixed,
            food_services=all_fixed,
            transportation=all_fixed,
        )
        registry = ExpenseRuleRegistry()
        registry.register("all-fixed", rules)

        assert "all-fixed" in registry
        assert registry.get_preset("all-fixed") is rules
        assert registry.names() == ["dashboard", "expense-report", "all-fixed"]

    def test_registry_instances_are_independent(self) -> None:
        registry = ExpenseRuleRegistry({"only": DASHBOARD_RULES})
        assert "dashboard" not in registry
        with pytest.raises(UnknownPresetError):
            registry.get_preset("dashboard")
        assert "dashboard" in ExpenseRuleRegistry()


class TestExpenseRuleTable:
    def test_ten_rows_for_every_line(self) -> None:
        rules = get_expense_rules(DASHBOARD_RULES)
        assert [r.id for r in rules] == [
            "rent",
            "security",
            "it-maintenance",
            "landscaping",
            "janitorial",
            "utilities",
            "repairs",
            "food-services",
            "transportation",
            "depreciation",
        ]

    def test_rent_and_depreciation_always_fixed(self) -> None:
        for preset in (DASHBOARD_RULES, EXPENSE_REPORT_RULES):
            by_id = {r.id: r for r in get_expense_rules(preset)}
            for rule_id in ("rent", "depreciation"):
                assert by_id[rule_id].fixed_percent == 1.0
                assert by_id[rule_id].cost_behavior == CostBehavior.FIXED

    def test_rows_follow_the_preset(self) -> None:
        by_id = {r.id: r for r in get_expense_rules(EXPENSE_REPORT_RULES)}
        assert by_id["security"].fixed_percent == pytest.approx(0.80)
        assert by_id["security"].variable_percent == pytest.approx(0.20)

    def test_fractions_sum_to_one(self) -> None:
        for rule in get_expense_rules(DASHBOARD_RULES):
            assert rule.fixed_percent + rule.variable_percent == pytest.approx(1.0)
