"""CSV export command."""

import click

from bizanalytics.cli.error_handling import handle_domain_error
from bizanalytics.domain.csv_export import (
    DEFAULT_EXPORT_FILENAME,
    export_transactions_csv,
    write_transactions_csv,
)
from bizanalytics.domain.errors import DomainError


def export_to(transactions, output: str) -> None:
    """Write the CSV export to a path, or to stdout when output is '-'."""
    if output == "-":
        click.echo(export_transactions_csv(transactions))
        return
    path = write_transactions_csv(transactions, output)
    click.echo(f"Exported {len(transactions)} transactions to {path}")


@click.command("export")
@click.option(
    "--output",
    "-o",
    default=DEFAULT_EXPORT_FILENAME,
    show_default=True,
    help="Destination file, or '-' for stdout",
)
@click.pass_context
def export_csv(ctx, output: str):
    """Export transactions as CSV for spreadsheet upload."""
    try:
        export_to(ctx.obj["store"].list_transactions(), output)
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_csv)
