"""Service for seasonal and month-over-month spending analysis."""

from typing import Dict, Iterable, List
import calendar
import logging

from pattern_engine.config import settings
from pattern_engine.schemas.seasonal import SeasonalInsight, SeasonalIntensity, SpendingSpike
from pattern_engine.schemas.transaction import Transaction

logger = logging.getLogger(__name__)

MONTH_NAMES = list(calendar.month_name)[1:]


def get_monthly_category_totals(transactions: Iterable[Transaction]) -> Dict[str, List[float]]:
    """Expense totals per category and calendar month (index 0 = January)."""
    totals: Dict[str, List[float]] = {}
    for t in transactions:
        if not t.is_expense:
            continue
        months = totals.setdefault(t.category, [0.0] * 12)
        months[t.date.month - 1] += t.magnitude
    return totals


def detect_seasonal_patterns(transactions: Iterable[Transaction]) -> Dict[str, List[float]]:
    """
    Seasonal multipliers per category: month spend / average monthly spend.

    Only categories whose largest multiplier exceeds the smallest nonzero one
    by more than settings.seasonal_variation_threshold are reported.
    """
    totals = get_monthly_category_totals(transactions)
    patterns = {}

    for category, months in totals.items():
        average = sum(months) / 12
        multipliers = [m / average if average else 0.0 for m in months]

        nonzero = [m for m in multipliers if m > 0]
        if not nonzero:
            continue
        if max(multipliers) - min(nonzero) > settings.seasonal_variation_threshold:
            patterns[category] = multipliers

    logger.debug(f"Seasonal analysis: {len(totals)} categories, {len(patterns)} seasonal")
    return patterns


def classify_intensity(multiplier: float) -> SeasonalIntensity:
    if multiplier > settings.seasonal_high_multiplier:
        return SeasonalIntensity.high
    if multiplier > settings.seasonal_elevated_multiplier:
        return SeasonalIntensity.elevated
    return SeasonalIntensity.moderate


def get_seasonal_insights(transactions: Iterable[Transaction]) -> List[SeasonalInsight]:
    """Describe the peak and low month of every seasonal category."""
    insights = []
    for category, multipliers in detect_seasonal_patterns(transactions).items():
        peak = max(range(12), key=lambda i: multipliers[i])
        low = min((i for i in range(12) if multipliers[i] > 0), key=lambda i: multipliers[i])
        intensity = classify_intensity(multipliers[peak])

        insights.append(SeasonalInsight(
            category=category,
            peak_month=MONTH_NAMES[peak],
            low_month=MONTH_NAMES[low],
            peak_multiplier=multipliers[peak],
            intensity=intensity,
            insight=(
                f"{category} spending peaks in {MONTH_NAMES[peak]} at "
                f"{multipliers[peak]:.1f}x your monthly average ({intensity.value}), "
                f"and is lowest in {MONTH_NAMES[low]}."
            ),
        ))
    return insights


def detect_spending_spikes(transactions: Iterable[Transaction]) -> List[SpendingSpike]:
    """Calendar months whose total spend is well above the average month."""
    monthly: Dict[str, float] = {}
    for t in transactions:
        if t.is_expense:
            key = f"{t.date.year}-{t.date.month:02d}"
            monthly[key] = monthly.get(key, 0.0) + t.magnitude

    if not monthly:
        return []

    average = sum(monthly.values()) / len(monthly)
    return [
        SpendingSpike(
            month=month,
            total=round(total, 2),
            average=round(average, 2),
            percent_increase=round((total - average) / average * 100, 1),
        )
        for month, total in sorted(monthly.items())
        if total > average * settings.spike_multiplier
    ]
