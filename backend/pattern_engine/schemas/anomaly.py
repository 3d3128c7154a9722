"""Pydantic schemas for spending anomalies."""

import enum
from pydantic import BaseModel

from pattern_engine.schemas.transaction import Transaction


class Severity(str, enum.Enum):
    """Anomaly severity enumeration."""
    low = "low"
    medium = "medium"
    high = "high"

    def escalate(self) -> "Severity":
        """One level up, capped at high."""
        if self == Severity.low:
            return Severity.medium
        return Severity.high


class SpendingAnomaly(BaseModel):
    transaction: Transaction
    deviation: float  # |z| in standard deviations
    reason: str
    severity: Severity

    model_config = {"frozen": True}
