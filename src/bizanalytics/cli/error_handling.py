"""CLI error handling helpers."""

import click

from bizanalytics.domain.entities import MutationOutcome, MutationResult
from bizanalytics.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def describe_mutation(result: MutationResult, transaction_id: str | None = None) -> str:
    """Return a one-line message describing a mutation outcome."""
    txn = result.transaction
    if result.outcome == MutationOutcome.ADDED:
        return f"Added transaction {txn.id} ({txn.product_name})"
    if result.outcome == MutationOutcome.UPDATED:
        return f"Updated transaction {txn.id}"
    if result.outcome == MutationOutcome.DELETED:
        return f"Deleted transaction {txn.id}"
    if result.outcome == MutationOutcome.REJECTED_EMPTY_NAME:
        return "Nothing added: product name is required"
    return f"No change: transaction '{transaction_id}' not found"
