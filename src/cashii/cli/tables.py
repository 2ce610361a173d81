"""Plain-text table rendering for CLI output."""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

import click

from cashii.domain.entities import AccountRecord, Transaction
from cashii.utils.amount_parser import format_currency

Row = TypeVar("Row")

DATE_FORMAT = "%m/%d/%Y"


@dataclass(frozen=True)
class Column(Generic[Row]):
    """A table column.

    ``value`` receives the row, its index and the full row sequence so a
    cell can depend on its neighbours.
    """

    header: str
    value: Callable[[Row, int, Sequence[Row]], str]
    align: str = "left"

    def pad(self, text: str, width: int) -> str:
        return text.rjust(width) if self.align == "right" else text.ljust(width)


def render_table(
    columns: Sequence[Column[Row]],
    rows: Sequence[Row],
    style: Optional[Callable[[Row, str], str]] = None,
) -> str:
    """Render rows as an aligned table.

    Args:
        columns: Column definitions
        rows: Rows to render
        style: Optional hook to decorate each padded cell of a row

    Returns:
        Table text, header and separator included
    """
    cells = [[column.value(row, i, rows) for column in columns] for i, row in enumerate(rows)]
    widths = [
        max([len(column.header)] + [len(line[c]) for line in cells])
        for c, column in enumerate(columns)
    ]

    lines = [
        "  ".join(column.pad(column.header, widths[c]) for c, column in enumerate(columns)),
        "  ".join("-" * width for width in widths),
    ]
    for row, line in zip(rows, cells):
        padded = [column.pad(line[c], widths[c]) for c, column in enumerate(columns)]
        if style is not None:
            padded = [style(row, text) for text in padded]
        lines.append("  ".join(padded))
    return "\n".join(lines)


def _format_date(value) -> str:
    return value.strftime(DATE_FORMAT) if value is not None else ""


def _format_amount(value) -> str:
    return format_currency(value) if value is not None else ""


TRANSACTION_COLUMNS: list[Column[Transaction]] = [
    Column("ID", lambda t, i, rows: str(i), align="right"),
    Column("Date", lambda t, i, rows: _format_date(t.date)),
    Column("Memo", lambda t, i, rows: t.memo or ""),
    Column("Amount", lambda t, i, rows: _format_amount(t.amount), align="right"),
    Column("Trigger", lambda t, i, rows: t.trigger.value),
]


def _record_date(record: AccountRecord, i: int, rows: Sequence[AccountRecord]) -> str:
    # Repeated dates are left blank so days read as groups
    if i > 0 and rows[i - 1].transaction.date == record.transaction.date:
        return ""
    return _format_date(record.transaction.date)


RECORD_COLUMNS: list[Column[AccountRecord]] = [
    Column("Date", _record_date),
    Column("Memo", lambda r, i, rows: r.transaction.memo or "", align="right"),
    Column("Amount", lambda r, i, rows: format_currency(r.transaction.amount), align="right"),
    Column("Total", lambda r, i, rows: format_currency(r.running_total), align="right"),
]


def style_record(record: AccountRecord, text: str) -> str:
    """Green for inflows, red while the balance is negative."""
    if record.transaction.amount > 0:
        return click.style(text, fg="bright_green")
    if record.running_total < 0:
        return click.style(text, fg="bright_red")
    return text


def render_transactions(transactions: Sequence[Transaction]) -> str:
    return render_table(TRANSACTION_COLUMNS, transactions)


def render_statement(records: Sequence[AccountRecord]) -> str:
    return render_table(RECORD_COLUMNS, records, style=style_record)
