"""Calendar date utilities for todo.txt lines.

todo.txt dates are plain calendar dates in ``YYYY-MM-DD`` form. There is no
time-of-day and no timezone, so everything here works on ``datetime.date``.
"""

import re
from datetime import date, datetime
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"
DATE_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today() -> date:
    """Return the current local calendar date."""
    return date.today()


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` string into a date.

    Args:
        date_str: Candidate date token, or None

    Returns:
        The parsed date, or None if the token has the wrong shape or names
        a day that does not exist (e.g. ``2012-13-99``)
    """
    if not date_str or not DATE_SHAPE.match(date_str):
        return None

    try:
        return datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(value: Optional[date]) -> str:
    """Format a date as ``YYYY-MM-DD``; absent dates format as an empty string."""
    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)
