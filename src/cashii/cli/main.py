"""Main CLI entry point."""

import logging

import click

from cashii.cli.error_handling import handle_domain_error
from cashii.domain.errors import DomainError
from cashii.domain.ledger import LedgerService
from cashii.logging_config import setup_logging
from cashii.storage.factories import create_storage

# Import and register all commands at module level
from cashii.cli.commands import transaction, transfer, view


@click.group()
@click.version_option(package_name="cashii")
@click.option(
    "--ledger-path",
    type=click.Path(dir_okay=False),
    help="Path to the ledger file (overrides CASHII_LEDGER_PATH environment variable)",
    envvar="CASHII_LEDGER_PATH",
)
@click.option("--debug", is_flag=True, envvar="CASHII_DEBUG", help="Log debug output to stderr")
@click.pass_context
def cli(ctx, ledger_path: str | None, debug: bool):
    """Cashii - A CLI budgeting app.

    Record one-time and recurring transactions and view a running-balance
    statement for any month or date range.
    """
    ctx.ensure_object(dict)
    setup_logging(logging.DEBUG if debug else logging.WARNING)

    # Load the ledger only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            storage = create_storage(ledger_path)
            ctx.call_on_close(storage.close)
            service = LedgerService(storage)
            service.load()
        except DomainError as e:
            handle_domain_error(ctx, e)
        ctx.obj["service"] = service


# Register all commands
transfer.register_commands(cli)
transaction.register_commands(cli)
view.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
