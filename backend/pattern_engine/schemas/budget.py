"""Pydantic schemas for budget tracking."""

import enum
from pydantic import BaseModel
from typing import Optional


class BudgetStatusLevel(str, enum.Enum):
    on_track = "on_track"
    high_usage = "high_usage"
    warning = "warning"
    over_budget = "over_budget"


class Variability(str, enum.Enum):
    stable = "stable"
    moderate = "moderate"
    high = "high"


class BudgetVerdict(str, enum.Enum):
    no_budget = "no_budget"
    too_low = "too_low"
    room_to_reduce = "room_to_reduce"
    looks_good = "looks_good"


class BudgetStatus(BaseModel):
    category: str
    budget: float
    spent: float
    remaining: float
    percent_used: float
    status: BudgetStatusLevel

    model_config = {"frozen": True}


class BudgetStatusSummary(BaseModel):
    over_budget_count: int
    warning_count: int
    total_categories: int


class BudgetRecommendation(BaseModel):
    """Suggested monthly budget for one category."""
    category: str
    average_monthly: float
    coefficient_of_variation: float
    recommended_amount: float
    variability: Variability
    current_budget: Optional[float] = None
    verdict: BudgetVerdict

    model_config = {"frozen": True}
