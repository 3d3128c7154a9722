"""Shared test fixtures."""

import itertools
import pytest
from decimal import Decimal

from pattern_engine.schemas.transaction import Transaction, load_transactions, load_budgets


@pytest.fixture
def make_transaction():
    """Factory for transactions with sequential ids."""
    ids = itertools.count(1)

    def _make(txn_date, amount, description, category, user_id="user-001"):
        return Transaction(
            id=f"txn-{next(ids)}",
            date=txn_date,
            amount=Decimal(str(amount)),
            description=description,
            category=category,
            user_id=user_id,
        )

    return _make


@pytest.fixture
def sample_transactions():
    """Mixed household activity for user-001 across 2025."""
    rows = [
        # Monthly rent
        ("2025-01-01", -1200, "Apartment Complex Rent", "Housing"),
        ("2025-02-01", -1200, "Apartment Complex Rent", "Housing"),
        ("2025-03-01", -1200, "Apartment Complex Rent", "Housing"),
        ("2025-04-01", -1200, "Apartment Complex Rent", "Housing"),
        # Weekly groceries
        ("2025-01-05", -85, "SuperMart Grocery Store", "Food"),
        ("2025-01-12", -92, "SuperMart Grocery Store", "Food"),
        ("2025-01-19", -88, "SuperMart Grocery Store", "Food"),
        ("2025-01-26", -90, "SuperMart Grocery Store", "Food"),
        # Merchant name variants
        ("2025-01-03", -45, "Starbucks Coffee #123", "Food"),
        ("2025-01-10", -42, "Starbucks Coffee Store", "Food"),
        ("2025-01-15", -38, "Starbucks Cafe Downtown", "Food"),
        # Everyday food baseline
        ("2025-01-02", -25, "Fast Food Restaurant", "Food"),
        ("2025-01-04", -30, "Pizza Place", "Food"),
        ("2025-01-08", -28, "Burger Joint", "Food"),
        ("2025-01-14", -32, "Sandwich Shop", "Food"),
        # Outliers
        ("2025-01-20", -250, "Expensive Restaurant", "Food"),
        ("2025-01-25", -500, "Unknown Merchant XYZ", "Shopping"),
        # Summer-heavy entertainment
        ("2025-06-15", -150, "Concert Tickets", "Entertainment"),
        ("2025-07-20", -200, "Theme Park", "Entertainment"),
        ("2025-08-10", -175, "Festival Pass", "Entertainment"),
        ("2025-12-05", -50, "Movie Tickets", "Entertainment"),
        ("2025-01-15", -45, "Streaming Service", "Entertainment"),
        # Utilities
        ("2025-01-15", -120, "Electric Company Bill", "Utilities"),
        ("2025-02-15", -125, "Electric Company Bill", "Utilities"),
        ("2025-03-15", -115, "Electric Company Bill", "Utilities"),
        # Income
        ("2025-01-01", 3000, "Salary Deposit", "Income"),
        ("2025-02-01", 3000, "Salary Deposit", "Income"),
        # Shopping across many merchants
        ("2025-01-10", -75, "Target Store", "Shopping"),
        ("2025-01-12", -65, "Walmart", "Shopping"),
        ("2025-01-15", -80, "Amazon Purchase", "Shopping"),
        ("2025-01-18", -55, "Best Buy", "Shopping"),
        ("2025-01-22", -90, "Costco", "Shopping"),
        ("2025-01-25", -45, "Home Depot", "Shopping"),
    ]
    return load_transactions(
        {
            "id": str(i),
            "date": txn_date,
            "amount": amount,
            "description": description,
            "category": category,
            "user_id": "user-001",
        }
        for i, (txn_date, amount, description, category) in enumerate(rows, start=1)
    )


@pytest.fixture
def sample_budgets():
    """Monthly budgets matching the sample categories."""
    return load_budgets([
        {"category": "Food", "amount": 400},
        {"category": "Housing", "amount": 1200},
        {"category": "Shopping", "amount": 200},
        {"category": "Utilities", "amount": 150},
        {"category": "Entertainment", "amount": 100},
    ])
