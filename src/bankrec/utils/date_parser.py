"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Tried in order; the first pattern that matches decides the field order.
_YEAR_FIRST = re.compile(r"^(\d{4})[/-](\d{1,2})[/-](\d{1,2})$")
_DAY_FIRST = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$")
_DAY_MONTH_NAME = re.compile(r"^(\d{1,2})[ -]+([a-zA-Z]{3})[ -]+(\d{4})$")


def parse_statement_date(date_str: str) -> Optional[date]:
    """Parse a date cell from a bank statement export.

    Accepted grammars, tried in this order:
    - "2024/01/15" or "2024-01-15"
    - "15/01/2024" or "15-01-2024" (day first, never month first)
    - "15 Jan 2024" or "15-Jan-2024"

    Args:
        date_str: Raw cell text

    Returns:
        Date object, or None if the text matches no grammar or names a day
        that does not exist
    """
    text = date_str.strip()

    match = _YEAR_FIRST.match(text)
    if match:
        return _make_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    match = _DAY_FIRST.match(text)
    if match:
        return _make_date(int(match.group(3)), int(match.group(2)), int(match.group(1)))

    match = _DAY_MONTH_NAME.match(text)
    if match:
        month = _MONTHS.get(match.group(2).lower())
        if month is None:
            return None
        return _make_date(int(match.group(3)), month, int(match.group(1)))

    return None


def _make_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(date_str: str) -> date:
    """Parse a date string given on the command line.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this month", etc.

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

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            return today - timedelta(days=today.weekday() + 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    # Statement grammars first so "05/01/2024" stays day-first
    statement_date = parse_statement_date(date_str)
    if statement_date is not None:
        return statement_date

    try:
        dt = date_parser.parse(date_str, dayfirst=True)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
