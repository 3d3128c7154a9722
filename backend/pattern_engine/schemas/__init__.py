"""
Pydantic schemas package.
"""

from pattern_engine.schemas.transaction import (
    Transaction,
    Budget,
    BudgetPeriod,
    load_transactions,
    load_budgets,
)
from pattern_engine.schemas.recurring import (
    Frequency,
    RecurringPattern,
    RecurringCostSummary,
)
from pattern_engine.schemas.anomaly import (
    Severity,
    SpendingAnomaly,
)
from pattern_engine.schemas.savings import (
    Priority,
    SavingsOpportunity,
)
from pattern_engine.schemas.seasonal import (
    SeasonalIntensity,
    SeasonalInsight,
    SpendingSpike,
)
from pattern_engine.schemas.budget import (
    BudgetStatusLevel,
    BudgetStatus,
    BudgetStatusSummary,
    Variability,
    BudgetVerdict,
    BudgetRecommendation,
)

__all__ = [
    "Transaction",
    "Budget",
    "BudgetPeriod",
    "load_transactions",
    "load_budgets",
    "Frequency",
    "RecurringPattern",
    "RecurringCostSummary",
    "Severity",
    "SpendingAnomaly",
    "Priority",
    "SavingsOpportunity",
    "SeasonalIntensity",
    "SeasonalInsight",
    "SpendingSpike",
    "BudgetStatusLevel",
    "BudgetStatus",
    "BudgetStatusSummary",
    "Variability",
    "BudgetVerdict",
    "BudgetRecommendation",
]
