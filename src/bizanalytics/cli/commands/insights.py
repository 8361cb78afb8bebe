"""AI insights command."""

import click

from bizanalytics.cli.rendering import render_insight_text
from bizanalytics.domain.insights import InsightService
from bizanalytics.domain.metrics import compute_metrics


def request_insights(settings, store) -> str:
    """Run the insight service over the current store contents."""
    transactions = store.list_transactions()
    service = InsightService(settings)
    return service.generate_business_insights(transactions, compute_metrics(transactions))


@click.command("insights")
@click.pass_context
def show_insights(ctx):
    """Ask the AI analyst for a review of the current data.

    Requires the API_KEY environment variable.
    """
    click.echo("Analyzing...", err=True)
    text = request_insights(ctx.obj["settings"], ctx.obj["store"])
    click.echo("\nAI Business Insights (Pakistan Market):")
    click.echo("-" * 80)
    click.echo(render_insight_text(text))


def register_commands(cli):
    """Register insights command with main CLI."""
    cli.add_command(show_insights)
