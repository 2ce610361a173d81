"""Statement and balance commands."""

from datetime import date

import click

from cashii.cli.error_handling import handle_domain_error
from cashii.cli.tables import DATE_FORMAT, render_statement
from cashii.domain.ledger import LedgerService, month_bounds
from cashii.utils.amount_parser import format_currency
from cashii.utils.date_parser import parse_date, parse_month, parse_year


def resolve_statement_range(
    ctx: click.Context,
    *,
    month: str | None,
    year: str | None,
    start_date: str | None,
    end_date: str | None,
) -> tuple[date, date]:
    """Resolve a statement window from month/year or explicit dates.

    Explicit dates need both ends and cannot be combined with --month or
    --year. With neither, the window is the given (or current) month.
    """
    if start_date or end_date:
        if month or year:
            click.echo(
                "Error: --month/--year cannot be combined with --start-date or --end-date.",
                err=True,
            )
            ctx.exit(1)
        if not (start_date and end_date):
            click.echo("Error: --start-date and --end-date must be given together.", err=True)
            ctx.exit(1)

        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)
        return start, end

    today = date.today()
    try:
        view_month = parse_month(month) if month else today.month
        view_year = parse_year(year) if year else today.year
        return month_bounds(view_year, view_month)
    except ValueError as e:
        handle_domain_error(ctx, e)


@click.command("view")
@click.option("--month", "-m", help="Month to view (1-12, defaults to the current month)")
@click.option("--year", "-y", help="Year to view (YYYY, defaults to the current year)")
@click.option("--start-date", help="Start of a custom range (MM/DD/YYYY or YYYY-MM-DD)")
@click.option("--end-date", help="End of a custom range, inclusive")
@click.pass_context
def view_statement(
    ctx,
    month: str | None,
    year: str | None,
    start_date: str | None,
    end_date: str | None,
) -> None:
    """Show the running-balance statement for a month or date range.

    Recurring transactions are expanded into every occurrence inside the
    range, and the balance carried in from earlier occurrences is shown as
    the opening balance.

    Examples:
        cashii view
        cashii view --month 3 --year 2024
        cashii view --start-date 01/01/2024 --end-date 06/30/2024
    """
    service: LedgerService = ctx.obj["service"]
    start, end = resolve_statement_range(
        ctx, month=month, year=year, start_date=start_date, end_date=end_date
    )

    try:
        records = service.statement(start, end)
        opening = service.balance_before(start)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Statement {start.strftime(DATE_FORMAT)} - {end.strftime(DATE_FORMAT)}"
    )
    click.echo(f"Opening balance: {format_currency(opening)}")

    if not records:
        click.echo("No transactions in this period.")
        return

    click.echo(render_statement(records))
    click.echo(f"Closing balance: {format_currency(records[-1].running_total)}")


@click.command("balance")
@click.option("--date", "date_str", help="Balance carried into this date (defaults to today)")
@click.pass_context
def show_balance(ctx, date_str: str | None) -> None:
    """Show the balance of every occurrence before a date."""
    service: LedgerService = ctx.obj["service"]

    cutoff = date.today()
    if date_str:
        try:
            cutoff = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    balance = service.balance_before(cutoff)
    click.echo(f"Balance before {cutoff.strftime(DATE_FORMAT)}: {format_currency(balance)}")


def register_commands(cli: click.Group) -> None:
    """Register statement commands with main CLI."""
    cli.add_command(view_statement)
    cli.add_command(show_balance)
