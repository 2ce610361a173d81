"""Utility functions for cashii."""

from cashii.utils.date_parser import parse_date, parse_month, parse_year
from cashii.utils.amount_parser import format_currency, parse_amount

__all__ = ["parse_date", "parse_month", "parse_year", "parse_amount", "format_currency"]
