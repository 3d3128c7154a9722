"""Service for budget status checks and budget recommendations."""

from typing import Dict, Iterable, List, Optional
import logging
import statistics

from pattern_engine.config import settings
from pattern_engine.schemas.budget import (
    BudgetRecommendation,
    BudgetStatus,
    BudgetStatusLevel,
    BudgetStatusSummary,
    BudgetVerdict,
    Variability,
)
from pattern_engine.schemas.transaction import Budget, Transaction

logger = logging.getLogger(__name__)


def _status_level(percent_used: float) -> BudgetStatusLevel:
    if percent_used >= 100:
        return BudgetStatusLevel.over_budget
    if percent_used >= settings.budget_warning_percent:
        return BudgetStatusLevel.warning
    if percent_used >= settings.budget_high_usage_percent:
        return BudgetStatusLevel.high_usage
    return BudgetStatusLevel.on_track


def check_budget_status(
    transactions: Iterable[Transaction],
    budgets: Iterable[Budget]
) -> List[BudgetStatus]:
    """
    Compare expense totals to each budget.
    Transactions are expected to already cover the budget's period.
    """
    spent_by_category: Dict[str, float] = {}
    for t in transactions:
        if t.is_expense:
            spent_by_category[t.category] = spent_by_category.get(t.category, 0.0) + t.magnitude

    results = []
    for budget in budgets:
        limit = float(budget.amount)
        spent = spent_by_category.get(budget.category, 0.0)
        percent_used = spent / limit * 100
        results.append(BudgetStatus(
            category=budget.category,
            budget=limit,
            spent=round(spent, 2),
            remaining=round(limit - spent, 2),
            percent_used=round(percent_used, 1),
            status=_status_level(percent_used),
        ))
    return results


def summarize_budget_status(statuses: Iterable[BudgetStatus]) -> BudgetStatusSummary:
    statuses = list(statuses)
    return BudgetStatusSummary(
        over_budget_count=sum(1 for s in statuses if s.status == BudgetStatusLevel.over_budget),
        warning_count=sum(1 for s in statuses if s.status == BudgetStatusLevel.warning),
        total_categories=len(statuses),
    )


def recommend_budgets(
    transactions: Iterable[Transaction],
    budgets: Optional[Iterable[Budget]] = None
) -> List[BudgetRecommendation]:
    """
    Suggest a monthly budget per category from its month-to-month history.

    Highly variable categories (by coefficient of variation) get a larger
    buffer over their average month than steadier ones.
    """
    monthly: Dict[str, Dict[str, float]] = {}
    for t in transactions:
        if not t.is_expense:
            continue
        month_key = f"{t.date.year}-{t.date.month:02d}"
        by_month = monthly.setdefault(t.category, {})
        by_month[month_key] = by_month.get(month_key, 0.0) + t.magnitude

    current = {b.category: float(b.amount) for b in (budgets or [])}

    recommendations = []
    for category, by_month in monthly.items():
        totals = list(by_month.values())
        average = statistics.fmean(totals)
        cv = statistics.pstdev(totals) / average

        if cv > settings.budget_high_variability_cv:
            variability = Variability.high
        elif cv > settings.budget_moderate_variability_cv:
            variability = Variability.moderate
        else:
            variability = Variability.stable

        if variability == Variability.high:
            recommended = average * settings.budget_volatile_buffer
        else:
            recommended = average * settings.budget_stable_buffer

        budget = current.get(category)
        if budget is None:
            verdict = BudgetVerdict.no_budget
        elif budget < average * settings.budget_too_low_ratio:
            verdict = BudgetVerdict.too_low
        elif budget > recommended * settings.budget_room_to_reduce_ratio:
            verdict = BudgetVerdict.room_to_reduce
        else:
            verdict = BudgetVerdict.looks_good

        recommendations.append(BudgetRecommendation(
            category=category,
            average_monthly=round(average, 2),
            coefficient_of_variation=round(cv, 3),
            recommended_amount=round(recommended, 2),
            variability=variability,
            current_budget=budget,
            verdict=verdict,
        ))

    recommendations.sort(key=lambda r: r.average_monthly, reverse=True)
    logger.debug(f"Budget recommendations for {len(recommendations)} categories")
    return recommendations
