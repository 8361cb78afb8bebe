"""Interactive editing session."""

import shlex

import click

from bizanalytics.cli.commands.export import export_to
from bizanalytics.cli.commands.insights import request_insights
from bizanalytics.cli.commands.transaction import normalize_field_name
from bizanalytics.cli.error_handling import describe_mutation
from bizanalytics.cli.rendering import (
    echo_dashboard,
    echo_transaction_table,
    render_insight_text,
)
from bizanalytics.domain.csv_export import DEFAULT_EXPORT_FILENAME
from bizanalytics.domain.dashboard import DashboardService
from bizanalytics.domain.errors import DomainError
from bizanalytics.domain.transaction import TransactionService

SHELL_HELP = """Commands:
  show                                   Show the full dashboard
  table                                  Show the transaction table
  add NAME [REVENUE [PRODUCT_COST [MARKETING_COST [OTHER_EXPENSES [DATE]]]]]
                                         Add a transaction (amounts default to 0, date to today)
  set ID FIELD VALUE                     Change one field of a transaction
  delete ID                              Delete a transaction
  export [PATH]                          Export CSV (default: bizanalytics_data_pkr.csv, '-' for stdout)
  insights                               Ask the AI analyst for a review
  help                                   Show this help
  quit                                   Leave the session"""


class DashboardShell:
    """Line-oriented session editing one record store."""

    def __init__(self, store, settings):
        self.store = store
        self.settings = settings
        self.transactions = TransactionService(store)
        self.dashboard = DashboardService(store)

    def run_line(self, line: str) -> bool:
        """Execute one command line. Returns False when the session should end."""
        try:
            args = shlex.split(line)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            return True
        if not args:
            return True

        command, args = args[0].lower(), args[1:]
        if command in ("quit", "exit"):
            return False

        handler = getattr(self, f"do_{command}", None)
        if handler is None:
            click.echo(f"Unknown command '{command}'. Type 'help' for a list.", err=True)
            return True

        try:
            handler(args)
        except DomainError as e:
            click.echo(f"Error: {e}", err=True)
        except click.UsageError as e:
            click.echo(f"Usage: {e.message}", err=True)
        return True

    def do_help(self, args):
        click.echo(SHELL_HELP)

    def do_show(self, args):
        echo_dashboard(self.dashboard.build_report())

    def do_table(self, args):
        echo_transaction_table(self.store.list_transactions())

    def do_add(self, args):
        if not args or len(args) > 6:
            raise click.UsageError("add NAME [REVENUE [PRODUCT_COST [MARKETING_COST [OTHER_EXPENSES [DATE]]]]]")
        name, amounts, date = args[0], args[1:5], None
        if len(args) == 6:
            date = args[5]
        amounts = amounts + ["0"] * (4 - len(amounts))
        result = self.transactions.add_transaction(name, date, *amounts)
        click.echo(describe_mutation(result))

    def do_set(self, args):
        if len(args) != 3:
            raise click.UsageError("set ID FIELD VALUE")
        transaction_id, field, value = args
        result = self.transactions.update_field(
            transaction_id, normalize_field_name(field), value
        )
        click.echo(describe_mutation(result, transaction_id))

    def do_delete(self, args):
        if len(args) != 1:
            raise click.UsageError("delete ID")
        transaction_id = args[0]
        result = self.transactions.delete_transaction(transaction_id)
        click.echo(describe_mutation(result, transaction_id))

    def do_export(self, args):
        output = args[0] if args else DEFAULT_EXPORT_FILENAME
        export_to(self.store.list_transactions(), output)

    def do_insights(self, args):
        click.echo("Analyzing...")
        click.echo(render_insight_text(request_insights(self.settings, self.store)))


@click.command("shell")
@click.pass_context
def run_shell(ctx):
    """Edit transactions interactively and watch the dashboard update.

    Changes last for the session only; use 'export' to save a CSV copy.
    """
    session = DashboardShell(ctx.obj["store"], ctx.obj["settings"])
    click.echo("BizAnalytics session. Type 'help' for commands, 'quit' to leave.")
    while True:
        try:
            line = click.prompt("bizanalytics", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break
        if not session.run_line(line):
            break


def register_commands(cli):
    """Register shell command with main CLI."""
    cli.add_command(run_shell)
