"""Transaction listing and removal commands."""

import click

from cashii.cli.error_handling import handle_domain_error
from cashii.cli.tables import render_transactions
from cashii.domain.ledger import LedgerService
from cashii.utils.amount_parser import format_currency


@click.command("list")
@click.pass_context
def list_transactions(ctx) -> None:
    """List stored transactions.

    Transactions appear in the order they were added, not by date. The ID
    column is that position and is what 'remove' expects; IDs after a
    removed transaction shift down by one.
    """
    service: LedgerService = ctx.obj["service"]

    transactions = service.list_transactions()
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(render_transactions(transactions))


@click.command("remove")
@click.argument("transaction_id", metavar="ID", type=int)
@click.pass_context
def remove_transaction(ctx, transaction_id: int) -> None:
    """Remove a transaction by ID (see 'list').

    Examples:
        cashii remove 3
        cashii rm 0
    """
    service: LedgerService = ctx.obj["service"]

    try:
        removed = service.remove_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    amount = format_currency(removed.amount) if removed.amount is not None else "no amount"
    click.echo(f"Removed transaction {transaction_id} ({removed.memo or 'no memo'}, {amount})")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(list_transactions)
    cli.add_command(remove_transaction)
    cli.add_command(remove_transaction, name="rm")
