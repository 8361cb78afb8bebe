"""Tests for metric aggregation."""

from datetime import date
from decimal import Decimal

import pytest

from bizanalytics.domain.entities import ComputedMetrics, ExpenseBreakdown, ProfitStatus
from bizanalytics.domain.metrics import (
    build_expense_breakdown,
    build_monthly_rollup,
    calculate_marketing_roi,
    classify_profit,
    compute_metrics,
)
from bizanalytics.store.sample_data import sample_transactions


def _metrics(product_cost=0, marketing_cost=0, other_expenses=0, revenue=0):
    product_cost = Decimal(product_cost)
    marketing_cost = Decimal(marketing_cost)
    other_expenses = Decimal(other_expenses)
    total_costs = product_cost + marketing_cost + other_expenses
    return ComputedMetrics(
        total_revenue=Decimal(revenue),
        total_product_cost=product_cost,
        total_marketing_cost=marketing_cost,
        total_other_expenses=other_expenses,
        total_costs=total_costs,
        net_profit=Decimal(revenue) - total_costs,
        marketing_roi=Decimal(0),
        profit_status=ProfitStatus.BREAK_EVEN,
        break_even_point=total_costs,
    )


class TestComputeMetrics:
    """Tests for compute_metrics."""

    def test_empty_collection(self):
        """An empty collection yields zeros and Break-Even."""
        metrics = compute_metrics([])

        assert metrics.total_revenue == 0
        assert metrics.total_product_cost == 0
        assert metrics.total_marketing_cost == 0
        assert metrics.total_other_expenses == 0
        assert metrics.total_costs == 0
        assert metrics.net_profit == 0
        assert metrics.marketing_roi == 0
        assert metrics.profit_status == ProfitStatus.BREAK_EVEN
        assert metrics.break_even_point == 0

    def test_sample_totals(self):
        """Totals over the sample data."""
        metrics = compute_metrics(sample_transactions())

        assert metrics.total_revenue == Decimal("2700000")
        assert metrics.total_product_cost == Decimal("670000")
        assert metrics.total_marketing_cost == Decimal("600000")
        assert metrics.total_other_expenses == Decimal("155000")
        assert metrics.total_costs == Decimal("1425000")
        assert metrics.net_profit == Decimal("1275000")
        assert metrics.marketing_roi == Decimal("350")
        assert metrics.profit_status == ProfitStatus.PROFIT

    def test_totals_are_consistent(self, make_transaction):
        """Total costs and net profit follow from the four sums."""
        transactions = [
            make_transaction(id="a", revenue="100.5", product_cost="10.25", marketing_cost=3, other_expenses="7.1"),
            make_transaction(id="b", revenue=40, product_cost=60, marketing_cost=0, other_expenses=5),
        ]
        metrics = compute_metrics(transactions)

        assert metrics.total_costs == (
            metrics.total_product_cost + metrics.total_marketing_cost + metrics.total_other_expenses
        )
        assert metrics.net_profit == metrics.total_revenue - metrics.total_costs

    def test_break_even_point_equals_total_costs(self):
        metrics = compute_metrics(sample_transactions())
        assert metrics.break_even_point == metrics.total_costs

    def test_order_independent(self):
        """Input order does not change the result."""
        transactions = sample_transactions()
        assert compute_metrics(transactions) == compute_metrics(list(reversed(transactions)))

    @pytest.mark.parametrize(
        "revenue,cost,expected",
        [
            (200, 100, ProfitStatus.PROFIT),
            (50, 100, ProfitStatus.LOSS),
            (100, 100, ProfitStatus.BREAK_EVEN),
        ],
    )
    def test_profit_status(self, make_transaction, revenue, cost, expected):
        """Net profit of 100, -50 and 0 classify as Profit, Loss and Break-Even."""
        metrics = compute_metrics([make_transaction(revenue=revenue, product_cost=cost)])
        assert metrics.profit_status == expected

    def test_roi_zero_without_marketing_spend(self, make_transaction):
        """Marketing ROI is exactly 0 when nothing was spent on marketing."""
        metrics = compute_metrics([make_transaction(revenue=1_000_000, product_cost=10)])
        assert metrics.marketing_roi == 0

    def test_roi_formula(self, make_transaction):
        metrics = compute_metrics([make_transaction(revenue=300, marketing_cost=100)])
        assert metrics.marketing_roi == Decimal("200")


def test_classify_profit():
    assert classify_profit(Decimal("100")) == ProfitStatus.PROFIT
    assert classify_profit(Decimal("-50")) == ProfitStatus.LOSS
    assert classify_profit(Decimal("0")) == ProfitStatus.BREAK_EVEN


def test_calculate_marketing_roi_negative_revenue_margin():
    """ROI goes negative when revenue is below marketing spend."""
    assert calculate_marketing_roi(Decimal(50), Decimal(100)) == Decimal("-50")


class TestMonthlyRollup:
    """Tests for build_monthly_rollup."""

    def test_empty(self):
        assert build_monthly_rollup([]) == []

    def test_sample_rollup(self):
        rollup = build_monthly_rollup(sample_transactions())

        assert [entry.name for entry in rollup] == ["Jan", "Feb", "Mar"]
        jan, feb, mar = rollup
        assert (jan.revenue, jan.costs, jan.profit) == (820000, 435000, 385000)
        assert (feb.revenue, feb.costs, feb.profit) == (670000, 310000, 360000)
        assert (mar.revenue, mar.costs, mar.profit) == (1210000, 680000, 530000)

    def test_sorted_by_calendar_month(self, make_transaction):
        """Output runs Jan to Dec whatever the input order."""
        transactions = [
            make_transaction(id="1", date=date(2024, 12, 1), revenue=1),
            make_transaction(id="2", date=date(2024, 3, 1), revenue=1),
            make_transaction(id="3", date=date(2024, 7, 1), revenue=1),
            make_transaction(id="4", date=date(2024, 1, 1), revenue=1),
        ]
        rollup = build_monthly_rollup(transactions)
        assert [entry.name for entry in rollup] == ["Jan", "Mar", "Jul", "Dec"]

    def test_same_month_different_years_merge(self, make_transaction):
        """March 2024 and March 2025 share one "Mar" bucket."""
        transactions = [
            make_transaction(id="1", date=date(2024, 3, 5), revenue=100, product_cost=40),
            make_transaction(id="2", date=date(2025, 3, 20), revenue=50, other_expenses=20),
        ]
        rollup = build_monthly_rollup(transactions)

        assert len(rollup) == 1
        assert rollup[0].name == "Mar"
        assert rollup[0].revenue == 150
        assert rollup[0].costs == 60
        assert rollup[0].profit == 90

    def test_split_years_keeps_years_apart(self, make_transaction):
        transactions = [
            make_transaction(id="1", date=date(2025, 3, 20), revenue=50),
            make_transaction(id="2", date=date(2024, 3, 5), revenue=100),
            make_transaction(id="3", date=date(2024, 11, 5), revenue=10),
        ]
        rollup = build_monthly_rollup(transactions, split_years=True)

        assert [entry.name for entry in rollup] == ["Mar 2024", "Nov 2024", "Mar 2025"]
        assert [entry.revenue for entry in rollup] == [100, 10, 50]


class TestExpenseBreakdown:
    """Tests for build_expense_breakdown."""

    def test_all_categories(self):
        breakdown = build_expense_breakdown(compute_metrics(sample_transactions()))
        assert breakdown == [
            ExpenseBreakdown(name="Product Cost", value=Decimal("670000")),
            ExpenseBreakdown(name="Marketing", value=Decimal("600000")),
            ExpenseBreakdown(name="Operations/Other", value=Decimal("155000")),
        ]

    def test_only_marketing(self):
        """Zero categories are omitted."""
        breakdown = build_expense_breakdown(_metrics(product_cost=0, marketing_cost=500, other_expenses=0))
        assert breakdown == [ExpenseBreakdown(name="Marketing", value=Decimal("500"))]

    def test_no_expenses(self):
        assert build_expense_breakdown(compute_metrics([])) == []

    def test_order_is_fixed(self):
        breakdown = build_expense_breakdown(_metrics(product_cost=1, other_expenses=900))
        assert [entry.name for entry in breakdown] == ["Product Cost", "Operations/Other"]
