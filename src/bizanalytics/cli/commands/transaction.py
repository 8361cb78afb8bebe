"""Transaction editing commands."""

import click

from bizanalytics.cli.commands.export import export_to
from bizanalytics.cli.error_handling import describe_mutation, handle_domain_error
from bizanalytics.cli.rendering import echo_kpi_cards, echo_transaction_table
from bizanalytics.domain.dashboard import build_kpi_cards
from bizanalytics.domain.errors import DomainError
from bizanalytics.domain.metrics import compute_metrics
from bizanalytics.domain.transaction import TransactionService


def normalize_field_name(field: str) -> str:
    """Map CLI spellings like 'product-name' to entity field names."""
    return field.strip().lower().replace("-", "_")


def _show_result(ctx, output: str | None) -> None:
    transactions = ctx.obj["store"].list_transactions()
    echo_transaction_table(transactions)
    echo_kpi_cards(build_kpi_cards(compute_metrics(transactions)))
    if output:
        try:
            export_to(transactions, output)
        except DomainError as e:
            handle_domain_error(ctx, e)


@click.command("add")
@click.option("--product", "product_name", required=True, help="Product or service name")
@click.option(
    "--date",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to today",
)
@click.option("--revenue", default="0", help="Revenue in PKR")
@click.option("--product-cost", default="0", help="Product cost in PKR")
@click.option("--marketing-cost", default="0", help="Marketing cost in PKR")
@click.option("--other-expenses", default="0", help="Other expenses in PKR")
@click.option("--output", "-o", help="Export the resulting collection to this CSV file")
@click.pass_context
def add_transaction(
    ctx,
    product_name: str,
    date: str | None,
    revenue: str,
    product_cost: str,
    marketing_cost: str,
    other_expenses: str,
    output: str | None,
):
    """Add a transaction to the front of the table.

    Examples:
        bizanalytics add --product "Consulting Service A" --revenue 500000 --marketing-cost 120000
        bizanalytics add --product "Product Sales B" --date 2024-03-01 --revenue "Rs 320,000"
    """
    service = TransactionService(ctx.obj["store"])
    try:
        result = service.add_transaction(
            product_name=product_name,
            date=date,
            revenue=revenue,
            product_cost=product_cost,
            marketing_cost=marketing_cost,
            other_expenses=other_expenses,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(describe_mutation(result))
    if result.changed:
        _show_result(ctx, output)


@click.command("update")
@click.argument("transaction_id")
@click.argument("field")
@click.argument("value")
@click.option("--output", "-o", help="Export the resulting collection to this CSV file")
@click.pass_context
def update_transaction(ctx, transaction_id: str, field: str, value: str, output: str | None):
    """Change one field of a transaction.

    FIELD is one of date, product-name, revenue, product-cost,
    marketing-cost, other-expenses.

    Examples:
        bizanalytics update 3 revenue 600000
        bizanalytics update 4 product-name "Product Sales D"
    """
    service = TransactionService(ctx.obj["store"])
    try:
        result = service.update_field(transaction_id, normalize_field_name(field), value)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(describe_mutation(result, transaction_id))
    if result.changed:
        _show_result(ctx, output)


@click.command("delete")
@click.argument("transaction_id")
@click.option("--output", "-o", help="Export the resulting collection to this CSV file")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, output: str | None):
    """Delete a transaction."""
    service = TransactionService(ctx.obj["store"])
    result = service.delete_transaction(transaction_id)

    click.echo(describe_mutation(result, transaction_id))
    if result.changed:
        _show_result(ctx, output)


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(add_transaction)
    cli.add_command(update_transaction)
    cli.add_command(delete_transaction)
