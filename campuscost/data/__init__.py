"""Data layer for the campuscost engine: records, presets, tier table."""

from campuscost.data.expense_rules import ExpenseRuleRegistry, get_expense_rules, get_preset
from campuscost.data.repository import SchoolRecordRepository, load_records
from campuscost.data.seed import SEED_SCHOOL_RECORDS

__all__ = [
    "SEED_SCHOOL_RECORDS",
    "ExpenseRuleRegistry",
    "SchoolRecordRepository",
    "get_expense_rules",
    "get_preset",
    "load_records",
]
