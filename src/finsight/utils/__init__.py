"""Utility functions for finsight."""

from finsight.utils.date_parser import parse_date, parse_month
from finsight.utils.amount_parser import parse_amount, to_decimal

__all__ = ["parse_date", "parse_month", "parse_amount", "to_decimal"]
