"""Pydantic schemas for seasonal and monthly spending analysis."""

import enum
from pydantic import BaseModel


class SeasonalIntensity(str, enum.Enum):
    high = "high"
    elevated = "elevated"
    moderate = "moderate"


class SeasonalInsight(BaseModel):
    """Human-readable summary of one category's seasonal profile."""
    category: str
    peak_month: str
    low_month: str
    peak_multiplier: float
    intensity: SeasonalIntensity
    insight: str

    model_config = {"frozen": True}


class SpendingSpike(BaseModel):
    month: str  # YYYY-MM
    total: float
    average: float
    percent_increase: float

    model_config = {"frozen": True}
