"""Pydantic schemas for recurring payment detection."""

import enum
from pydantic import BaseModel
from datetime import date


class Frequency(str, enum.Enum):
    """Recurring frequency enumeration."""
    daily = "daily"
    weekly = "weekly"
    biweekly = "biweekly"
    monthly = "monthly"
    yearly = "yearly"


class RecurringPattern(BaseModel):
    """A regular-interval payment relationship with one merchant."""
    merchant: str
    category: str
    average_amount: float
    frequency: Frequency
    next_expected_date: date
    confidence: float
    occurrences: int
    interval_days: float

    model_config = {"frozen": True}


class RecurringCostSummary(BaseModel):
    total_monthly: float
    total_yearly: float
    subscription_count: int

    model_config = {"frozen": True}
