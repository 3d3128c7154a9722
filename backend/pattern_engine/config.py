"""
Analysis configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from typing import List


class Settings(BaseSettings):
    """Heuristic thresholds for the pattern analyses."""

    # Recurring detection
    recurring_min_occurrences: int = 3
    recurring_max_interval_cv: float = 0.3  # stddev / mean interval
    recurring_min_interval_days: float = 1.0
    recurring_size_bonus_per_txn: float = 0.05
    recurring_max_size_bonus: float = 0.3

    # Anomaly detection
    anomaly_min_samples: int = 3
    anomaly_z_threshold: float = 2.0
    anomaly_medium_z: float = 2.5
    anomaly_high_z: float = 3.0
    anomaly_escalation_min_category_size: int = 5

    # Savings opportunities
    savings_max_results: int = 10
    savings_overrun_high_ratio: float = 0.5
    savings_overrun_medium_ratio: float = 0.2
    savings_top_categories: int = 3
    savings_top_min_total: float = 100.0
    savings_top_reduction_rate: float = 0.15
    savings_top_high_total: float = 500.0
    savings_top_medium_total: float = 200.0
    savings_small_txn_min_count: int = 10
    savings_small_txn_max_average: float = 50.0
    savings_small_txn_rate: float = 0.10
    savings_merchant_min_count: int = 5
    savings_merchant_min_total: float = 200.0
    savings_merchant_rate: float = 0.08
    holiday_categories: List[str] = ["Entertainment", "Shopping", "Food", "Travel"]
    holiday_months: List[int] = [11, 12]
    holiday_min_total: float = 300.0
    holiday_reduction_rate: float = 0.20

    # Merchant clustering
    cluster_similarity_threshold: float = 0.8
    cluster_word_overlap_threshold: float = 0.6
    cluster_min_token_length: int = 3

    # Seasonal analysis
    seasonal_variation_threshold: float = 0.5
    seasonal_high_multiplier: float = 2.0
    seasonal_elevated_multiplier: float = 1.5
    spike_multiplier: float = 1.5

    # Budgets
    budget_warning_percent: float = 90.0
    budget_high_usage_percent: float = 75.0
    budget_high_variability_cv: float = 0.3
    budget_moderate_variability_cv: float = 0.15
    budget_volatile_buffer: float = 1.15
    budget_stable_buffer: float = 1.10
    budget_too_low_ratio: float = 0.9
    budget_room_to_reduce_ratio: float = 1.2

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
