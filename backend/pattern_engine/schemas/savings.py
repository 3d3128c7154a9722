"""Pydantic schemas for savings recommendations."""

import enum
from pydantic import BaseModel


class Priority(str, enum.Enum):
    """Recommendation priority enumeration."""
    low = "low"
    medium = "medium"
    high = "high"

    @property
    def rank(self) -> int:
        return {"low": 1, "medium": 2, "high": 3}[self.value]


class SavingsOpportunity(BaseModel):
    category: str
    potential_savings: float
    recommendation: str
    priority: Priority

    model_config = {"frozen": True}
