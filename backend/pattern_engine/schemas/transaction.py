"""
Transaction and budget schemas.
"""

import enum
from pydantic import BaseModel, Field
from typing import Any, Iterable, List, Optional
from datetime import date
from decimal import Decimal


class Transaction(BaseModel):
    """A single ledger entry. Negative amount = expense, positive = income."""

    id: str
    date: date
    amount: Decimal = Field(allow_inf_nan=False)
    description: str
    category: str
    user_id: Optional[str] = None

    model_config = {"from_attributes": True, "frozen": True}

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def magnitude(self) -> float:
        return abs(float(self.amount))


class BudgetPeriod(str, enum.Enum):
    """Budget period enumeration."""
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"


class Budget(BaseModel):
    category: str
    amount: Decimal = Field(gt=0, allow_inf_nan=False)
    period: BudgetPeriod = BudgetPeriod.monthly

    model_config = {"from_attributes": True, "frozen": True}


def load_transactions(records: Iterable[Any]) -> List[Transaction]:
    """
    Validate dicts, ORM rows or Transaction instances into Transactions.
    Raises pydantic.ValidationError on malformed records.
    """
    return [
        r if isinstance(r, Transaction) else Transaction.model_validate(r)
        for r in records
    ]


def load_budgets(records: Optional[Iterable[Any]]) -> List[Budget]:
    """Validate budget records; None is treated as no budgets."""
    if records is None:
        return []
    return [
        r if isinstance(r, Budget) else Budget.model_validate(r)
        for r in records
    ]
