"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - US dates: "01/15/2024" (month first)
    - ISO dates: "2024-01-15"
    - Other absolute dates: "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "next month", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if not date_str:
        raise ValueError("Empty date string")
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "last/this/next" + month or year
    for prefix, offset in (("last ", -1), ("this ", 0), ("next ", 1)):
        if date_str.startswith(prefix):
            period = date_str[len(prefix):]
            if period == "month":
                return (today + relativedelta(months=offset)).replace(day=1)
            if period == "year":
                return today.replace(month=1, day=1) + relativedelta(years=offset)
            if period == "week":
                return today - timedelta(days=today.weekday()) + timedelta(weeks=offset)

    # MM/DD/YYYY is the format the CLI documents; try it strictly first
    try:
        return datetime.strptime(date_str, "%m/%d/%Y").date()
    except ValueError:
        pass

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str) -> int:
    """Parse a month number (1-12).

    Raises:
        ValueError: If the value is not a month number
    """
    try:
        month = int(month_str)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid month '{month_str}'")
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{month_str}', expected 1-12")
    return month


def parse_year(year_str: str) -> int:
    """Parse a four-digit year.

    Raises:
        ValueError: If the value is not a year
    """
    try:
        year = int(year_str)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid year '{year_str}'")
    if not 1 <= year <= 9999:
        raise ValueError(f"Invalid year '{year_str}'")
    return year
