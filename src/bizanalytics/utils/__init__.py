"""Utility functions for bizanalytics."""

from bizanalytics.utils.date_parser import parse_date
from bizanalytics.utils.amount_parser import parse_amount
from bizanalytics.utils.currency_format import format_compact, format_percent, format_pkr

__all__ = ["parse_date", "parse_amount", "format_pkr", "format_compact", "format_percent"]
