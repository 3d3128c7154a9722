"""Service for statistical spending anomaly detection."""

from typing import Dict, Iterable, List, Tuple
from collections import Counter
import logging
import statistics

from pattern_engine.config import settings
from pattern_engine.schemas.anomaly import Severity, SpendingAnomaly
from pattern_engine.schemas.transaction import Transaction
from pattern_engine.services.merchant_normalizer import extract_merchant_name

logger = logging.getLogger(__name__)


def get_category_stats(expenses: Iterable[Transaction]) -> Dict[str, Tuple[float, float]]:
    """
    Mean and population standard deviation of expense magnitudes per category.
    Categories with too few samples are left out.
    """
    amounts: Dict[str, List[float]] = {}
    for t in expenses:
        amounts.setdefault(t.category, []).append(t.magnitude)

    return {
        category: (statistics.fmean(values), statistics.pstdev(values))
        for category, values in amounts.items()
        if len(values) >= settings.anomaly_min_samples
    }


def classify_severity(z_abs: float) -> Severity:
    if z_abs > settings.anomaly_high_z:
        return Severity.high
    if z_abs > settings.anomaly_medium_z:
        return Severity.medium
    return Severity.low


def detect_anomalies(transactions: Iterable[Transaction]) -> List[SpendingAnomaly]:
    """
    Flag expenses more than two standard deviations from their category mean.

    A purchase at a merchant seen only once in a busy category is escalated
    one severity level. Returns anomalies ordered by descending deviation.
    """
    expenses = [t for t in transactions if t.is_expense]
    stats = get_category_stats(expenses)

    merchant_counts: Counter = Counter()
    category_sizes: Counter = Counter()
    for t in expenses:
        merchant_counts[(t.category, extract_merchant_name(t.description))] += 1
        category_sizes[t.category] += 1

    anomalies = []
    for t in expenses:
        if t.category not in stats:
            continue
        mean, std_dev = stats[t.category]
        if std_dev == 0:
            continue

        amount = t.magnitude
        z = (amount - mean) / std_dev
        if abs(z) <= settings.anomaly_z_threshold:
            continue

        severity = classify_severity(abs(z))
        merchant = extract_merchant_name(t.description)
        direction = "above" if z > 0 else "below"
        reason = (
            f"${amount:.2f} is {abs(z):.1f} standard deviations {direction} "
            f"your usual {t.category} spending of ${mean:.2f}"
        )

        is_unique_merchant = merchant_counts[(t.category, merchant)] == 1
        if is_unique_merchant and category_sizes[t.category] > settings.anomaly_escalation_min_category_size:
            severity = severity.escalate()
            reason += f" at a merchant not otherwise seen in {t.category}"

        anomalies.append(SpendingAnomaly(
            transaction=t,
            deviation=abs(z),
            reason=reason,
            severity=severity,
        ))

    anomalies.sort(key=lambda a: a.deviation, reverse=True)
    logger.debug(
        f"Anomaly detection: {len(expenses)} expenses across {len(stats)} "
        f"categories, {len(anomalies)} flagged"
    )
    return anomalies
