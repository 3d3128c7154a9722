"""
Transaction pattern analytics.

Pure, batch analyses over a snapshot of transactions: recurring payments,
spending anomalies, savings opportunities, merchant clusters and seasonal
spending cycles.
"""

from pattern_engine.services.merchant_normalizer import extract_merchant_name, normalize_for_comparison
from pattern_engine.services.similarity import levenshtein_distance, string_similarity
from pattern_engine.services.recurring_service import detect_recurring_transactions, summarize_recurring_costs
from pattern_engine.services.anomaly_service import detect_anomalies
from pattern_engine.services.savings_service import find_savings_opportunities
from pattern_engine.services.cluster_service import analyze_merchant_clusters
from pattern_engine.services.seasonal_service import (
    detect_seasonal_patterns,
    get_seasonal_insights,
    detect_spending_spikes,
)
from pattern_engine.services.budget_service import (
    check_budget_status,
    summarize_budget_status,
    recommend_budgets,
)

__version__ = "1.0.0"

__all__ = [
    "extract_merchant_name",
    "normalize_for_comparison",
    "levenshtein_distance",
    "string_similarity",
    "detect_recurring_transactions",
    "summarize_recurring_costs",
    "detect_anomalies",
    "find_savings_opportunities",
    "analyze_merchant_clusters",
    "detect_seasonal_patterns",
    "get_seasonal_insights",
    "detect_spending_spikes",
    "check_budget_status",
    "summarize_budget_status",
    "recommend_budgets",
]
