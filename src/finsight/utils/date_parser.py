"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and a few
    relative ones: "today", "yesterday", "tomorrow", and "last/this/next"
    followed by "month" or "year" (first day of that period).

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    offsets = {"last": -1, "this": 0, "next": 1}
    parts = date_str.split()
    if len(parts) == 2 and parts[0] in offsets:
        step = offsets[parts[0]]
        if parts[1] == "month":
            return (today + relativedelta(months=step)).replace(day=1)
        if parts[1] == "year":
            return today.replace(month=1, day=1) + relativedelta(years=step)

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str) -> tuple[int, int]:
    """Parse a month selector into (month, year).

    Accepts "YYYY-MM" as well as anything ``parse_date`` understands, such as
    "last month" or "October 2023"; the day is ignored.

    Raises:
        ValueError: If the string cannot be parsed
    """
    text = month_str.strip()
    pieces = text.split("-")
    if len(pieces) == 2 and all(p.isdigit() for p in pieces):
        year, month = int(pieces[0]), int(pieces[1])
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month in '{month_str}'")
        return month, year

    parsed = parse_date(text)
    return parsed.month, parsed.year
