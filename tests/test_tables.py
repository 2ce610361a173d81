"""Tests for CLI table rendering."""

from datetime import date
from decimal import Decimal

import click

from cashii.cli.tables import (
    Column,
    render_statement,
    render_table,
    render_transactions,
    style_record,
)
from cashii.domain.entities import AccountRecord, Transaction
from cashii.domain.trigger import Trigger


def test_render_table_aligns_columns():
    columns = [
        Column("Name", lambda row, i, rows: row[0]),
        Column("Value", lambda row, i, rows: row[1], align="right"),
    ]

    text = render_table(columns, [("a", "1"), ("longer", "200")])

    assert text.splitlines() == [
        "Name".ljust(6) + "  " + "Value",
        "-" * 6 + "  " + "-" * 5,
        "a".ljust(6) + "  " + "1".rjust(5),
        "longer" + "  " + "200".rjust(5),
    ]


def test_render_table_applies_style_per_cell():
    columns = [Column("X", lambda row, i, rows: row)]

    text = render_table(columns, ["a"], style=lambda row, cell: f"<{cell}>")

    assert text.splitlines()[-1] == "<a>"


def test_render_transactions():
    text = render_transactions(
        [
            Transaction(memo="Rent", amount=Decimal("-1200"), date=date(2024, 1, 1), trigger=Trigger.MONTHLY),
            Transaction(memo=None, amount=None, date=None),
        ]
    )
    lines = text.splitlines()

    assert lines[0].split() == ["ID", "Date", "Memo", "Amount", "Trigger"]
    assert lines[2].split() == ["0", "01/01/2024", "Rent", "-$1,200.00", "MONTHLY"]
    assert lines[3].split() == ["1", "ONCE"]


def _record(memo, amount, day, total):
    return AccountRecord(
        transaction=Transaction(memo=memo, amount=Decimal(amount), date=day),
        running_total=Decimal(total),
    )


def test_render_statement_blanks_repeated_dates():
    records = [
        _record("Salary", "2500", date(2024, 3, 1), "5100"),
        _record("Rent", "-1200", date(2024, 3, 1), "3900"),
        _record("Coffee", "-4.5", date(2024, 3, 2), "3895.5"),
    ]

    lines = click.unstyle(render_statement(records)).splitlines()

    assert lines[0].split() == ["Date", "Memo", "Amount", "Total"]
    assert lines[2].split() == ["03/01/2024", "Salary", "$2,500.00", "$5,100.00"]
    assert lines[3].split() == ["Rent", "-$1,200.00", "$3,900.00"]
    assert lines[3].startswith(" " * len("03/01/2024"))
    assert lines[4].split() == ["03/02/2024", "Coffee", "-$4.50", "$3,895.50"]


def test_style_record():
    inflow = _record("Salary", "10", date(2024, 1, 1), "-5")
    overdrawn = _record("Rent", "-10", date(2024, 1, 1), "-5")
    normal = _record("Rent", "-10", date(2024, 1, 1), "5")

    assert style_record(inflow, "x") == click.style("x", fg="bright_green")
    assert style_record(overdrawn, "x") == click.style("x", fg="bright_red")
    assert style_record(normal, "x") == "x"
