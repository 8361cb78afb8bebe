"""Domain model entities for bizanalytics.

These are pure data classes representing business concepts. Derived values
(metrics, rollups, breakdowns) have no identity of their own and are rebuilt
from the transaction collection whenever it changes.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class ProfitStatus(str, Enum):
    """Classification of net profit."""

    PROFIT = "Profit"
    LOSS = "Loss"
    BREAK_EVEN = "Break-Even"


class MutationOutcome(str, Enum):
    """Result of a record store mutation."""

    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"
    REJECTED_EMPTY_NAME = "rejected_empty_name"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: str
    date: date
    product_name: str
    revenue: Decimal
    product_cost: Decimal
    marketing_cost: Decimal
    other_expenses: Decimal

    @property
    def total_cost(self) -> Decimal:
        return self.product_cost + self.marketing_cost + self.other_expenses

    @property
    def net_profit(self) -> Decimal:
        return self.revenue - self.total_cost

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "productName": self.product_name,
            "revenue": float(self.revenue),
            "productCost": float(self.product_cost),
            "marketingCost": float(self.marketing_cost),
            "otherExpenses": float(self.other_expenses),
        }


@dataclass(frozen=True)
class ComputedMetrics:
    """Financial summary of a whole transaction collection."""

    total_revenue: Decimal
    total_product_cost: Decimal
    total_marketing_cost: Decimal
    total_other_expenses: Decimal
    total_costs: Decimal
    net_profit: Decimal
    marketing_roi: Decimal
    profit_status: ProfitStatus
    # Equal to total_costs; not a unit-based break-even calculation.
    break_even_point: Decimal

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "totalRevenue": float(self.total_revenue),
            "totalProductCost": float(self.total_product_cost),
            "totalMarketingCost": float(self.total_marketing_cost),
            "totalOtherExpenses": float(self.total_other_expenses),
            "totalCosts": float(self.total_costs),
            "netProfit": float(self.net_profit),
            "marketingROI": float(self.marketing_roi),
            "profitStatus": self.profit_status.value,
            "breakEvenPoint": float(self.break_even_point),
        }


@dataclass(frozen=True)
class MonthlyRollup:
    """Revenue, costs and profit for one calendar month label."""

    name: str
    revenue: Decimal
    costs: Decimal
    profit: Decimal


@dataclass(frozen=True)
class ExpenseBreakdown:
    """One category of the expense split."""

    name: str
    value: Decimal


@dataclass(frozen=True)
class KPICard:
    """Headline figure shown at the top of the dashboard."""

    title: str
    value: str
    trend: Optional[str] = None
    trend_up: bool = False


@dataclass(frozen=True)
class DashboardReport:
    """Everything the dashboard renders for one version of the store."""

    transactions: tuple[Transaction, ...]
    metrics: ComputedMetrics
    monthly_rollup: tuple[MonthlyRollup, ...]
    expense_breakdown: tuple[ExpenseBreakdown, ...]
    kpi_cards: tuple[KPICard, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of add, update or delete.

    ``transaction`` is the added, updated or deleted record; it is None for
    rejected and not-found outcomes.
    """

    outcome: MutationOutcome
    transaction: Optional[Transaction] = None

    @property
    def changed(self) -> bool:
        return self.outcome in (
            MutationOutcome.ADDED,
            MutationOutcome.UPDATED,
            MutationOutcome.DELETED,
        )
