"""Expense-rule models: fixed/variable splits for semi-variable cost lines."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from campuscost.models.enums import CostBehavior

_SPLIT_TOLERANCE = 1e-9


class CostSplit(BaseModel):
    """Fixed and variable fractions of a single cost line.

    The two fractions must sum to 1.0.
    """

    model_config = ConfigDict(frozen=True)

    fixed: float = Field(ge=0, le=1)
    variable: float = Field(ge=0, le=1)

    @model_validator(mode="after")
    def fractions_sum_to_one(self) -> CostSplit:
        if abs(self.fixed + self.variable - 1.0) > _SPLIT_TOLERANCE:
            msg = (
                f"Fixed and variable fractions must sum to 1.0, "
                f"got {self.fixed} + {self.variable}"
            )
            raise ValueError(msg)
        return self

    def apply(self, amount: float, enrollment_ratio: float) -> float:
        """Recompose ``amount`` with its variable share scaled by ``enrollment_ratio``."""
        return amount * self.fixed + amount * self.variable * enrollment_ratio


class ExpenseRuleSet(BaseModel):
    """Fixed/variable split for every semi-variable cost line."""

    model_config = ConfigDict(frozen=True)

    security: CostSplit
    it_maintenance: CostSplit
    landscaping: CostSplit
    janitorial: CostSplit
    utilities: CostSplit
    repairs: CostSplit
    food_services: CostSplit
    transportation: CostSplit


class ExpenseRule(BaseModel):
    """One row of the cost behaviour table shown alongside a preset."""

    id: str
    name: str
    category: str
    cost_behavior: CostBehavior
    fixed_percent: float
    variable_percent: float
    description: str
