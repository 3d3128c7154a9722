"""Service for recurring transaction detection."""

from typing import Dict, Iterable, List, Tuple
from datetime import timedelta
import logging
import math
import statistics

from pattern_engine.config import settings
from pattern_engine.schemas.recurring import Frequency, RecurringPattern, RecurringCostSummary
from pattern_engine.schemas.transaction import Transaction
from pattern_engine.services.merchant_normalizer import extract_merchant_name

logger = logging.getLogger(__name__)

# Upper bound (inclusive) of the mean interval in days for each frequency
FREQUENCY_BREAKPOINTS = [
    (2, Frequency.daily),
    (9, Frequency.weekly),
    (16, Frequency.biweekly),
    (35, Frequency.monthly),
]

MONTHLY_FACTORS = {
    Frequency.daily: 30.44,
    Frequency.weekly: 4.33,
    Frequency.biweekly: 2.17,
    Frequency.monthly: 1.0,
    Frequency.yearly: 1 / 12,
}


def classify_frequency(mean_interval: float) -> Frequency:
    """Map a mean interval in days to a frequency bucket."""
    for upper, frequency in FREQUENCY_BREAKPOINTS:
        if mean_interval <= upper:
            return frequency
    return Frequency.yearly


def group_by_merchant(
    transactions: Iterable[Transaction]
) -> Dict[Tuple[str, str], List[Transaction]]:
    """Group transactions by (display merchant, category), first-seen order."""
    groups: Dict[Tuple[str, str], List[Transaction]] = {}
    for t in transactions:
        key = (extract_merchant_name(t.description), t.category)
        groups.setdefault(key, []).append(t)
    return groups


def detect_recurring_transactions(transactions: Iterable[Transaction]) -> List[RecurringPattern]:
    """
    Detect regular-interval payments.

    A (merchant, category) group is recurring when it has enough members
    and the spread of its day intervals is small relative to their mean.
    Returns patterns ordered by descending confidence.
    """
    groups = group_by_merchant(transactions)
    patterns = []

    for (merchant, category), group in groups.items():
        if len(group) < settings.recurring_min_occurrences:
            continue

        group = sorted(group, key=lambda t: t.date)
        intervals = [
            (later.date - earlier.date).days
            for earlier, later in zip(group, group[1:])
        ]

        mean_interval = statistics.fmean(intervals)
        if mean_interval < settings.recurring_min_interval_days:
            continue

        std_interval = statistics.pstdev(intervals)
        if std_interval > mean_interval * settings.recurring_max_interval_cv:
            continue

        regularity = 1 - std_interval / mean_interval
        size_bonus = min(
            settings.recurring_max_size_bonus,
            settings.recurring_size_bonus_per_txn * len(group)
        )
        confidence = max(0.0, min(1.0, regularity + size_bonus))

        # Half-up: a 30.5 day mean steps 31 days
        step = math.floor(mean_interval + 0.5)

        patterns.append(RecurringPattern(
            merchant=merchant,
            category=category,
            average_amount=round(statistics.fmean(t.magnitude for t in group), 2),
            frequency=classify_frequency(mean_interval),
            next_expected_date=group[-1].date + timedelta(days=step),
            confidence=confidence,
            occurrences=len(group),
            interval_days=mean_interval,
        ))

    patterns.sort(key=lambda p: p.confidence, reverse=True)
    logger.debug(f"Recurring detection: {len(groups)} groups, {len(patterns)} patterns")
    return patterns


def summarize_recurring_costs(patterns: Iterable[RecurringPattern]) -> RecurringCostSummary:
    """Monthly and yearly cost of a set of recurring patterns."""
    patterns = list(patterns)
    total_monthly = sum(
        p.average_amount * MONTHLY_FACTORS[p.frequency] for p in patterns
    )
    return RecurringCostSummary(
        total_monthly=round(total_monthly, 2),
        total_yearly=round(total_monthly * 12, 2),
        subscription_count=len(patterns),
    )
