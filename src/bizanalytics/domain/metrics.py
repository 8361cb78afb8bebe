"""Metric aggregation over transaction collections.

All functions here are pure: they read a sequence of transactions (or the
metrics derived from one) and return new values. Nothing is cached, so
callers recompute after every change to the record store.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from bizanalytics.domain.entities import (
    ComputedMetrics,
    ExpenseBreakdown,
    MonthlyRollup,
    ProfitStatus,
    Transaction,
)

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

PRODUCT_COST_LABEL = "Product Cost"
MARKETING_LABEL = "Marketing"
OTHER_EXPENSES_LABEL = "Operations/Other"

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)


def classify_profit(net_profit: Decimal) -> ProfitStatus:
    """Classify net profit as Profit, Loss or Break-Even."""
    if net_profit > 0:
        return ProfitStatus.PROFIT
    if net_profit < 0:
        return ProfitStatus.LOSS
    return ProfitStatus.BREAK_EVEN


def calculate_marketing_roi(total_revenue: Decimal, total_marketing_cost: Decimal) -> Decimal:
    """Return marketing ROI as a percentage, or 0 when nothing was spent."""
    if total_marketing_cost <= 0:
        return _ZERO
    return (total_revenue - total_marketing_cost) / total_marketing_cost * _HUNDRED


def compute_metrics(transactions: Sequence[Transaction]) -> ComputedMetrics:
    """Compute summary metrics for a transaction collection.

    An empty collection yields zero totals, zero ROI and Break-Even status.

    Args:
        transactions: Transactions in any order

    Returns:
        ComputedMetrics for the whole collection
    """
    total_revenue = _ZERO
    total_product_cost = _ZERO
    total_marketing_cost = _ZERO
    total_other_expenses = _ZERO

    for txn in transactions:
        total_revenue += txn.revenue
        total_product_cost += txn.product_cost
        total_marketing_cost += txn.marketing_cost
        total_other_expenses += txn.other_expenses

    total_costs = total_product_cost + total_marketing_cost + total_other_expenses
    net_profit = total_revenue - total_costs

    return ComputedMetrics(
        total_revenue=total_revenue,
        total_product_cost=total_product_cost,
        total_marketing_cost=total_marketing_cost,
        total_other_expenses=total_other_expenses,
        total_costs=total_costs,
        net_profit=net_profit,
        marketing_roi=calculate_marketing_roi(total_revenue, total_marketing_cost),
        profit_status=classify_profit(net_profit),
        break_even_point=total_costs,
    )


def month_label(txn: Transaction) -> str:
    """Short month name ("Jan" ... "Dec") for a transaction's date."""
    return MONTH_LABELS[txn.date.month - 1]


def build_monthly_rollup(
    transactions: Sequence[Transaction], split_years: bool = False
) -> list[MonthlyRollup]:
    """Group transactions by calendar month and total each group.

    By default buckets are keyed by month name only, so January 2024 and
    January 2025 land in the same "Jan" bucket. Output is ordered Jan..Dec.
    With ``split_years`` buckets are keyed by (year, month), labelled like
    "Jan 2024" and ordered chronologically.

    Args:
        transactions: Transactions in any order
        split_years: Keep different years in separate buckets

    Returns:
        List of MonthlyRollup entries, one per bucket
    """
    buckets: dict[tuple[int, int], dict[str, Decimal]] = defaultdict(
        lambda: {"revenue": _ZERO, "costs": _ZERO, "profit": _ZERO}
    )

    for txn in transactions:
        year = txn.date.year if split_years else 0
        bucket = buckets[(year, txn.date.month)]
        costs = txn.total_cost
        bucket["revenue"] += txn.revenue
        bucket["costs"] += costs
        bucket["profit"] += txn.revenue - costs

    results = []
    for year, month in sorted(buckets):
        label = MONTH_LABELS[month - 1]
        if split_years:
            label = f"{label} {year}"
        data = buckets[(year, month)]
        results.append(
            MonthlyRollup(
                name=label,
                revenue=data["revenue"],
                costs=data["costs"],
                profit=data["profit"],
            )
        )
    return results


def build_expense_breakdown(metrics: ComputedMetrics) -> list[ExpenseBreakdown]:
    """Split total costs into product, marketing and other expenses.

    Categories with a zero (or negative) total are left out; the remaining
    entries keep the fixed order Product Cost, Marketing, Operations/Other.
    """
    entries = [
        ExpenseBreakdown(name=PRODUCT_COST_LABEL, value=metrics.total_product_cost),
        ExpenseBreakdown(name=MARKETING_LABEL, value=metrics.total_marketing_cost),
        ExpenseBreakdown(name=OTHER_EXPENSES_LABEL, value=metrics.total_other_expenses),
    ]
    return [entry for entry in entries if entry.value > 0]
