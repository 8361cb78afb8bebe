"""Dashboard viewing commands."""

import click

from bizanalytics.cli.rendering import echo_dashboard, echo_transaction_table
from bizanalytics.domain.dashboard import DashboardService


@click.command("dashboard")
@click.option(
    "--split-years",
    is_flag=True,
    help="Keep months of different years apart in the monthly performance table",
)
@click.pass_context
def show_dashboard(ctx, split_years: bool):
    """Show KPIs, monthly performance, expense breakdown and transactions."""
    service = DashboardService(ctx.obj["store"])
    echo_dashboard(service.build_report(split_years=split_years))


@click.command("table")
@click.pass_context
def show_table(ctx):
    """Show the transaction table with computed totals."""
    echo_transaction_table(ctx.obj["store"].list_transactions())


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(show_dashboard)
    cli.add_command(show_table)
