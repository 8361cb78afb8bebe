"""Domain layer for bizanalytics application."""

from bizanalytics.domain.transaction import TransactionService
from bizanalytics.domain.dashboard import DashboardService
from bizanalytics.domain.insights import InsightService
from bizanalytics.domain.metrics import (
    build_expense_breakdown,
    build_monthly_rollup,
    compute_metrics,
)

__all__ = [
    "TransactionService",
    "DashboardService",
    "InsightService",
    "compute_metrics",
    "build_monthly_rollup",
    "build_expense_breakdown",
]
