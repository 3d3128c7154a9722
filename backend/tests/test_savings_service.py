"""Tests for savings opportunity heuristics."""

import pytest
from datetime import date

from pattern_engine.config import settings
from pattern_engine.services.savings_service import (
    find_savings_opportunities,
    get_category_spending,
)
from pattern_engine.schemas.savings import Priority
from pattern_engine.schemas.transaction import Budget

SUMMER = date(2025, 6, 15)
HOLIDAYS = date(2025, 11, 20)


class TestCategorySpending:
    """Test expense aggregation per category."""

    def test_totals_and_merchants(self, sample_transactions):
        """Only expenses count; merchants are deduplicated."""
        spending = get_category_spending(sample_transactions)

        assert "Income" not in spending
        assert spending["Shopping"].total == pytest.approx(910)
        assert spending["Shopping"].count == 7
        assert len(spending["Shopping"].merchants) == 7
        assert spending["Housing"].average == pytest.approx(1200)


class TestBudgetOverrun:
    """Test budget overrun opportunities."""

    def test_shopping_overrun(self, make_transaction):
        """$350 against a $200 budget is a 75% overrun: high priority."""
        transactions = [
            make_transaction(date(2025, 3, 2), -200, "Department Store", "Shopping"),
            make_transaction(date(2025, 3, 9), -150, "Shoe Outlet", "Shopping"),
        ]
        budgets = [Budget(category="Shopping", amount=200)]
        opportunities = find_savings_opportunities(transactions, budgets, today=SUMMER)

        overrun = [o for o in opportunities if "over your Shopping budget" in o.recommendation]
        assert len(overrun) == 1
        assert overrun[0].potential_savings == 150.0
        assert overrun[0].priority == Priority.high

    @pytest.mark.parametrize("spent, expected", [
        (250, Priority.medium),
        (210, Priority.low),
    ])
    def test_overrun_priority_bands(self, make_transaction, spent, expected):
        """Over 20% is medium, anything less is low."""
        transactions = [make_transaction(date(2025, 3, 2), -spent, "Grocer", "Food")]
        opportunities = find_savings_opportunities(
            transactions, [Budget(category="Food", amount=200)], today=SUMMER
        )
        overrun = [o for o in opportunities if "over your Food budget" in o.recommendation]
        assert overrun[0].priority == expected
        assert overrun[0].potential_savings == pytest.approx(spent - 200)

    def test_under_budget(self, make_transaction):
        """No overrun when spending is within budget."""
        transactions = [make_transaction(date(2025, 3, 2), -50, "Grocer", "Food")]
        opportunities = find_savings_opportunities(
            transactions, [Budget(category="Food", amount=400)], today=SUMMER
        )
        assert opportunities == []

    def test_no_budgets(self, sample_transactions):
        """Budgets are optional."""
        opportunities = find_savings_opportunities(sample_transactions, None, today=SUMMER)
        assert all("budget of" not in o.recommendation for o in opportunities)


class TestHeuristics:
    """Test the spend-pattern heuristics."""

    def test_top_categories(self, sample_transactions):
        """The three largest categories get a 15% reduction target."""
        opportunities = find_savings_opportunities(sample_transactions, [], today=SUMMER)
        top = {o.category: o for o in opportunities if "highest spending" in o.recommendation}

        assert set(top) == {"Housing", "Food", "Shopping"}
        assert top["Housing"].potential_savings == pytest.approx(4800 * 0.15)
        assert top["Housing"].priority == Priority.high

    def test_small_transactions(self, make_transaction):
        """Many small purchases suggest bundling."""
        transactions = [
            make_transaction(date(2025, 3, d), -20, "Snack Bar", "Food")
            for d in range(1, 12)
        ]
        opportunities = find_savings_opportunities(transactions, [], today=SUMMER)
        bundling = [o for o in opportunities if "in bulk" in o.recommendation]

        assert len(bundling) == 1
        assert bundling[0].priority == Priority.low
        assert bundling[0].potential_savings == pytest.approx(22.0)

    def test_merchant_consolidation(self, make_transaction):
        """Six merchants and $300 of shopping suggest consolidating."""
        merchants = ["Target", "Walmart", "Amazon", "Best Buy", "Costco", "Home Depot"]
        transactions = [
            make_transaction(date(2025, 3, i + 1), -50, merchant, "Shopping")
            for i, merchant in enumerate(merchants)
        ]
        opportunities = find_savings_opportunities(transactions, [], today=SUMMER)
        consolidate = [o for o in opportunities if "Consolidating" in o.recommendation]

        assert len(consolidate) == 1
        assert consolidate[0].potential_savings == pytest.approx(24.0)

    def test_holiday_adjustment_in_season(self, make_transaction):
        """November travel over $300 gets a medium holiday suggestion."""
        transactions = [make_transaction(date(2025, 10, 5), -400, "Airline", "Travel")]
        opportunities = find_savings_opportunities(transactions, [], today=HOLIDAYS)
        holiday = [o for o in opportunities if "Holiday season" in o.recommendation]

        assert len(holiday) == 1
        assert holiday[0].priority == Priority.medium
        assert holiday[0].potential_savings == pytest.approx(80.0)

    def test_holiday_adjustment_out_of_season(self, make_transaction):
        """No holiday suggestion in June."""
        transactions = [make_transaction(date(2025, 5, 5), -400, "Airline", "Travel")]
        opportunities = find_savings_opportunities(transactions, [], today=SUMMER)
        assert not any("Holiday season" in o.recommendation for o in opportunities)

    def test_holiday_ignores_other_categories(self, make_transaction):
        """Only discretionary categories get holiday suggestions."""
        transactions = [make_transaction(date(2025, 10, 5), -900, "Hospital", "Medical")]
        opportunities = find_savings_opportunities(transactions, [], today=HOLIDAYS)
        assert not any("Holiday season" in o.recommendation for o in opportunities)


class TestPostProcessing:
    """Test ordering, deduplication and truncation."""

    def test_sorted_by_priority_then_savings(self, sample_transactions, sample_budgets):
        """Higher priority first, then larger savings."""
        opportunities = find_savings_opportunities(sample_transactions, sample_budgets, today=HOLIDAYS)
        keys = [(o.priority.rank, o.potential_savings) for o in opportunities]
        assert keys == sorted(keys, reverse=True)

    def test_at_most_ten_unique(self, make_transaction):
        """Fifteen overrun categories are cut to ten unique results."""
        transactions = []
        budgets = []
        for i in range(15):
            category = f"Category {i}"
            transactions.append(make_transaction(date(2025, 3, 1), -(300 + i), "Vendor", category))
            budgets.append(Budget(category=category, amount=100))

        opportunities = find_savings_opportunities(transactions, budgets + budgets, today=SUMMER)
        keys = [(o.category, o.recommendation) for o in opportunities]

        assert len(opportunities) == 10
        assert len(keys) == len(set(keys))

    def test_max_results_setting(self, sample_transactions, sample_budgets, monkeypatch):
        """The result cap is configurable."""
        monkeypatch.setattr(settings, "savings_max_results", 2)
        assert len(find_savings_opportunities(sample_transactions, sample_budgets, today=SUMMER)) == 2

    def test_idempotent(self, sample_transactions, sample_budgets):
        """Same input, same output."""
        first = find_savings_opportunities(sample_transactions, sample_budgets, today=HOLIDAYS)
        second = find_savings_opportunities(sample_transactions, sample_budgets, today=HOLIDAYS)
        assert first == second
