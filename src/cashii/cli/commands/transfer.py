"""Commands that record money coming in or going out."""

import click

from cashii.cli.error_handling import handle_domain_error
from cashii.domain.ledger import LedgerService
from cashii.domain.trigger import Trigger
from cashii.utils.amount_parser import format_currency, parse_amount
from cashii.utils.date_parser import parse_date


def _record_transfer(
    ctx: click.Context,
    memo: str,
    amount: str,
    date: str,
    trigger: str,
    scalar: int,
) -> None:
    service: LedgerService = ctx.obj["service"]

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: '{amount}' is an invalid transaction amount: {e}", err=True)
        ctx.exit(1)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: '{date}' is an invalid transaction date: {e}", err=True)
        ctx.exit(1)

    # Unknown triggers fall back to a one-time transaction
    txn_trigger = Trigger.parse(trigger.upper())

    try:
        index, transaction = service.transfer(
            memo=memo,
            amount=txn_amount,
            date=txn_date,
            trigger=txn_trigger,
            scalar=scalar,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {index}")
    click.echo(f"  Memo: {transaction.memo}")
    click.echo(f"  Date: {transaction.date}")
    click.echo(f"  Amount: {format_currency(transaction.amount)}")
    click.echo(f"  Trigger: {transaction.trigger.value}")


def _transfer_command(name: str, scalar: int, summary: str) -> click.Command:
    @click.command(name, help=summary)
    @click.argument("memo")
    @click.argument("amount")
    @click.argument("date")
    @click.argument("trigger", required=False, default=Trigger.ONCE.value)
    @click.pass_context
    def command(ctx, memo: str, amount: str, date: str, trigger: str) -> None:
        _record_transfer(ctx, memo, amount, date, trigger, scalar)

    return command


get_money = _transfer_command(
    "get",
    1,
    """Record money coming in.

    DATE is the first occurrence (MM/DD/YYYY, YYYY-MM-DD or 'today').
    TRIGGER is one of ONCE, DAILY, WEEKLY, MONTHLY or YEARLY (default ONCE).
    An amount starting with "-" must follow "--" so it is not read as an
    option; its sign is ignored.

    Examples:
        cashii get Salary 2500 01/01/2024 MONTHLY
        cashii get "Tax refund" 340.12 2024-04-15
        cashii get -- Refund -25 today
    """,
)

send_money = _transfer_command(
    "send",
    -1,
    """Record money going out.

    The amount is always stored as an outflow, whatever its sign.
    Put "--" before the arguments when the amount starts with "-".

    Examples:
        cashii send Rent 1200 01/01/2024 MONTHLY
        cashii send Coffee 4.50 today
        cashii send -- Refund -5 today
    """,
)


def register_commands(cli: click.Group) -> None:
    """Register transfer commands with main CLI."""
    cli.add_command(get_money)
    cli.add_command(send_money)
