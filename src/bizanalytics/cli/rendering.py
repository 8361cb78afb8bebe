"""Terminal rendering of dashboard views."""

import re
from typing import Sequence

import click

from bizanalytics.domain.entities import (
    DashboardReport,
    ExpenseBreakdown,
    KPICard,
    MonthlyRollup,
    Transaction,
)
from bizanalytics.utils.currency_format import format_compact, format_pkr

WIDTH = 80
TABLE_WIDTH = 132

_BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")


def _profit_color(value) -> str:
    if value > 0:
        return "green"
    if value < 0:
        return "red"
    return "yellow"


def echo_kpi_cards(cards: Sequence[KPICard]) -> None:
    click.echo("\nKey Metrics:")
    click.echo("-" * WIDTH)
    for card in cards:
        line = f"{card.title:<30} {card.value:>25}"
        if card.trend:
            trend = click.style(card.trend, fg="green" if card.trend_up else "red")
            line = f"{line}   {trend}"
        click.echo(line)


def echo_monthly_rollup(rollup: Sequence[MonthlyRollup]) -> None:
    click.echo("\nMonthly Performance:")
    click.echo("-" * WIDTH)
    if not rollup:
        click.echo("No transactions found.")
        return
    click.echo(f"{'Month':<12} {'Revenue':>20} {'Costs':>20} {'Profit':>20}")
    click.echo("-" * WIDTH)
    for entry in rollup:
        click.echo(
            f"{entry.name:<12} {format_compact(entry.revenue):>20} "
            f"{format_compact(entry.costs):>20} {format_compact(entry.profit):>20}"
        )


def echo_expense_breakdown(breakdown: Sequence[ExpenseBreakdown]) -> None:
    click.echo("\nExpense Breakdown:")
    click.echo("-" * WIDTH)
    if not breakdown:
        click.echo("No expenses recorded.")
        return
    total = sum(entry.value for entry in breakdown)
    for entry in breakdown:
        share = entry.value / total * 100
        click.echo(f"{entry.name:<30} {format_pkr(entry.value):>25} {float(share):>10.1f}%")


def echo_transaction_table(transactions: Sequence[Transaction]) -> None:
    click.echo("\nTransactions:")
    click.echo("-" * TABLE_WIDTH)
    if not transactions:
        click.echo("No transactions found.")
        return
    click.echo(
        f"{'ID':<13} {'Date':<10} {'Product / Service':<28} {'Revenue':>12} "
        f"{'Prod. Cost':>11} {'Mkt. Cost':>11} {'Other Exp.':>11} "
        f"{'Total Cost':>12} {'Net Profit':>12}"
    )
    click.echo("-" * TABLE_WIDTH)
    for txn in transactions:
        name = txn.product_name
        if len(name) > 28:
            name = name[:25] + "..."
        net_profit = click.style(f"{txn.net_profit:>12,}", fg=_profit_color(txn.net_profit))
        click.echo(
            f"{txn.id:<13} {txn.date.isoformat():<10} {name:<28} {txn.revenue:>12,} "
            f"{txn.product_cost:>11,} {txn.marketing_cost:>11,} {txn.other_expenses:>11,} "
            f"{txn.total_cost:>12,} {net_profit}"
        )


def echo_dashboard(report: DashboardReport) -> None:
    """Render every dashboard section."""
    echo_kpi_cards(report.kpi_cards)
    echo_monthly_rollup(report.monthly_rollup)
    echo_expense_breakdown(report.expense_breakdown)
    echo_transaction_table(report.transactions)


def render_insight_text(text: str) -> str:
    """Turn **bold** markers into terminal bold, keeping line breaks."""
    return _BOLD_PATTERN.sub(lambda m: click.style(m.group(1), bold=True), text)
