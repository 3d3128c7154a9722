"""Service for heuristic savings recommendations."""

from typing import Dict, Iterable, List, Optional
from dataclasses import dataclass, field
from datetime import date
import logging

from pattern_engine.config import settings
from pattern_engine.schemas.savings import Priority, SavingsOpportunity
from pattern_engine.schemas.transaction import Budget, Transaction
from pattern_engine.services.merchant_normalizer import extract_merchant_name

logger = logging.getLogger(__name__)


@dataclass
class CategorySpend:
    """Running expense totals for one category."""
    total: float = 0.0
    count: int = 0
    merchants: set = field(default_factory=set)

    @property
    def average(self) -> float:
        return self.total / self.count if self.count else 0.0


def get_category_spending(transactions: Iterable[Transaction]) -> Dict[str, CategorySpend]:
    """Expense total, count and distinct merchants per category."""
    spending: Dict[str, CategorySpend] = {}
    for t in transactions:
        if not t.is_expense:
            continue
        spend = spending.setdefault(t.category, CategorySpend())
        spend.total += t.magnitude
        spend.count += 1
        spend.merchants.add(extract_merchant_name(t.description))
    return spending


def _opportunity(category: str, savings: float, recommendation: str, priority: Priority) -> SavingsOpportunity:
    return SavingsOpportunity(
        category=category,
        potential_savings=round(savings, 2),
        recommendation=recommendation,
        priority=priority,
    )


def check_budget_overruns(
    spending: Dict[str, CategorySpend],
    budgets: Iterable[Budget]
) -> List[SavingsOpportunity]:
    opportunities = []
    for budget in budgets:
        spend = spending.get(budget.category)
        limit = float(budget.amount)
        if spend is None or spend.total <= limit:
            continue

        overrun = spend.total - limit
        ratio = overrun / limit
        if ratio > settings.savings_overrun_high_ratio:
            priority = Priority.high
        elif ratio > settings.savings_overrun_medium_ratio:
            priority = Priority.medium
        else:
            priority = Priority.low

        opportunities.append(_opportunity(
            budget.category,
            overrun,
            f"You're ${overrun:.2f} over your {budget.category} budget of ${limit:.2f}. "
            f"Review recent {budget.category} purchases to get back on track.",
            priority,
        ))
    return opportunities


def suggest_top_category_reductions(spending: Dict[str, CategorySpend]) -> List[SavingsOpportunity]:
    ranked = sorted(spending.items(), key=lambda item: item[1].total, reverse=True)
    rate = settings.savings_top_reduction_rate

    opportunities = []
    for category, spend in ranked[:settings.savings_top_categories]:
        if spend.total <= settings.savings_top_min_total:
            continue
        if spend.total > settings.savings_top_high_total:
            priority = Priority.high
        elif spend.total > settings.savings_top_medium_total:
            priority = Priority.medium
        else:
            priority = Priority.low

        opportunities.append(_opportunity(
            category,
            spend.total * rate,
            f"{category} is one of your highest spending categories (${spend.total:.2f}). "
            f"Cutting it by {rate:.0%} would save ${spend.total * rate:.2f}.",
            priority,
        ))
    return opportunities


def suggest_consolidation(spending: Dict[str, CategorySpend]) -> List[SavingsOpportunity]:
    """Small-purchase bundling and merchant consolidation hints."""
    opportunities = []
    for category, spend in spending.items():
        if (spend.count > settings.savings_small_txn_min_count
                and spend.average < settings.savings_small_txn_max_average):
            opportunities.append(_opportunity(
                category,
                spend.total * settings.savings_small_txn_rate,
                f"You made {spend.count} small {category} purchases averaging ${spend.average:.2f}. "
                f"Buying in bulk or bundling could save around {settings.savings_small_txn_rate:.0%}.",
                Priority.low,
            ))

        if (len(spend.merchants) > settings.savings_merchant_min_count
                and spend.total > settings.savings_merchant_min_total):
            opportunities.append(_opportunity(
                category,
                spend.total * settings.savings_merchant_rate,
                f"Your {category} spending is spread across {len(spend.merchants)} merchants. "
                f"Consolidating to fewer providers could unlock loyalty discounts.",
                Priority.low,
            ))
    return opportunities


def suggest_holiday_adjustments(spending: Dict[str, CategorySpend], today: date) -> List[SavingsOpportunity]:
    if today.month not in settings.holiday_months:
        return []

    rate = settings.holiday_reduction_rate
    opportunities = []
    for category, spend in spending.items():
        if category not in settings.holiday_categories or spend.total <= settings.holiday_min_total:
            continue
        opportunities.append(_opportunity(
            category,
            spend.total * rate,
            f"Holiday season is here. Planning {category} purchases ahead and "
            f"setting a holiday limit could cut spending by {rate:.0%}.",
            Priority.medium,
        ))
    return opportunities


def find_savings_opportunities(
    transactions: Iterable[Transaction],
    budgets: Optional[Iterable[Budget]] = None,
    today: Optional[date] = None
) -> List[SavingsOpportunity]:
    """
    Rank savings recommendations across expense categories.

    Combines budget overruns, top-spend reductions, consolidation hints and
    holiday-season adjustments. Exact (category, recommendation) duplicates
    are dropped; results are ordered by priority then potential savings and
    capped at settings.savings_max_results.
    """
    if today is None:
        today = date.today()

    spending = get_category_spending(transactions)

    candidates = (
        check_budget_overruns(spending, budgets or [])
        + suggest_top_category_reductions(spending)
        + suggest_consolidation(spending)
        + suggest_holiday_adjustments(spending, today)
    )

    seen = set()
    opportunities = []
    for opportunity in candidates:
        key = (opportunity.category, opportunity.recommendation)
        if key in seen:
            continue
        seen.add(key)
        opportunities.append(opportunity)

    opportunities.sort(key=lambda o: (o.priority.rank, o.potential_savings), reverse=True)
    logger.debug(
        f"Savings analysis: {len(spending)} categories, {len(candidates)} candidates, "
        f"{len(opportunities)} unique"
    )
    return opportunities[:settings.savings_max_results]
