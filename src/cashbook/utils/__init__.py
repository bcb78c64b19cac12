"""Utility functions for cashbook."""

from cashbook.utils.date_parser import parse_date, get_date_range
from cashbook.utils.amount_parser import parse_amount, format_currency

__all__ = ["parse_date", "get_date_range", "parse_amount", "format_currency"]
