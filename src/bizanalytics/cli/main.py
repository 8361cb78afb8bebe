"""Main CLI entry point."""

import logging

import click

from bizanalytics.config import load_settings
from bizanalytics.domain.errors import DomainError
from bizanalytics.store.factories import create_memory_store

# Import and register all commands at module level
from bizanalytics.cli.commands import (
    dashboard,
    transaction,
    export,
    insights,
    shell,
)


@click.group()
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False),
    help="CSV file in export layout to load (overrides BIZANALYTICS_DATA; "
    "sample data is used when neither is set)",
    envvar="BIZANALYTICS_DATA",
)
@click.option("--verbose", "-v", is_flag=True, help="Show informational log messages")
@click.pass_context
def cli(ctx, data_path: str | None, verbose: bool):
    """BizAnalytics - financial dashboard for small businesses (PKR).

    Aggregates revenue and cost records into KPIs, monthly performance and an
    expense breakdown, and can ask an AI analyst for a written review.
    """
    ctx.ensure_object(dict)

    # Load data only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        settings = load_settings()
        logging.basicConfig(
            level=logging.INFO if verbose else settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        try:
            store = create_memory_store(data_path=data_path)
        except (DomainError, FileNotFoundError) as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        ctx.obj["settings"] = settings
        ctx.obj["store"] = store


# Register all commands
dashboard.register_commands(cli)
transaction.register_commands(cli)
export.register_commands(cli)
insights.register_commands(cli)
shell.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
