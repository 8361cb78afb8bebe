"""Dashboard report domain service."""

from decimal import Decimal
from typing import TYPE_CHECKING

from bizanalytics.domain.entities import (
    ComputedMetrics,
    DashboardReport,
    KPICard,
    ProfitStatus,
)
from bizanalytics.domain.metrics import (
    build_expense_breakdown,
    build_monthly_rollup,
    compute_metrics,
)
from bizanalytics.utils.currency_format import format_percent, format_pkr

if TYPE_CHECKING:
    from bizanalytics.store.base import RecordStore

# Marketing ROI above this percentage is reported as healthy
HEALTHY_ROI_THRESHOLD = Decimal(100)


def build_kpi_cards(metrics: ComputedMetrics) -> list[KPICard]:
    """Build the four headline cards for a set of metrics."""
    return [
        KPICard(
            title="Total Revenue",
            value=format_pkr(metrics.total_revenue),
        ),
        KPICard(
            title="Total Costs",
            value=format_pkr(metrics.total_costs),
        ),
        KPICard(
            title="Net Profit",
            value=format_pkr(metrics.net_profit),
            trend=metrics.profit_status.value,
            trend_up=metrics.profit_status == ProfitStatus.PROFIT,
        ),
        KPICard(
            title="Marketing ROI",
            value=format_percent(metrics.marketing_roi),
            trend="Healthy" if metrics.marketing_roi > HEALTHY_ROI_THRESHOLD else "Low",
            trend_up=metrics.marketing_roi > HEALTHY_ROI_THRESHOLD,
        ),
    ]


class DashboardService:
    """Service deriving dashboard views from the record store."""

    def __init__(self, store: "RecordStore"):
        """Initialize dashboard service.

        Args:
            store: Record store instance
        """
        self.store = store

    def get_metrics(self) -> ComputedMetrics:
        """Compute metrics for the current collection."""
        return compute_metrics(self.store.list_transactions())

    def build_report(self, split_years: bool = False) -> DashboardReport:
        """Derive every dashboard view from one snapshot of the store.

        Args:
            split_years: Keep different years apart in the monthly rollup

        Returns:
            DashboardReport for the current collection
        """
        transactions = self.store.list_transactions()
        metrics = compute_metrics(transactions)
        return DashboardReport(
            transactions=transactions,
            metrics=metrics,
            monthly_rollup=tuple(build_monthly_rollup(transactions, split_years=split_years)),
            expense_breakdown=tuple(build_expense_breakdown(metrics)),
            kpi_cards=tuple(build_kpi_cards(metrics)),
        )
