import calendar
import re
from datetime import date, datetime

URL_DATE_RE = re.compile(r"/(\d{4})/(\d{2})/(\d{2})/")


def parse_period(year, month, day=None):
    """
    Validate CLI period arguments.
    Returns (start, end) dates, inclusive. Raises ValueError with a readable message.
    """
    if not re.fullmatch(r"\d{4}", str(year)):
        raise ValueError(f"Year must be in YYYY format, got {year!r}")
    if not re.fullmatch(r"\d{1,2}", str(month)) or not 1 <= int(month) <= 12:
        raise ValueError(f"Month must be between 01 and 12, got {month!r}")

    y, m = int(year), int(month)
    last_day = calendar.monthrange(y, m)[1]

    if day is None:
        return date(y, m, 1), date(y, m, last_day)

    if not re.fullmatch(r"\d{1,2}", str(day)) or not 1 <= int(day) <= last_day:
        raise ValueError(f"Day must be between 01 and {last_day:02d} for {y}-{m:02d}, got {day!r}")

    d = date(y, m, int(day))
    return d, d


def parse_published_date(value):
    """
    Parse an ISO-ish datetime attribute ("2024-03-15T06:00:00-04:00" or "2024-03-15").
    Returns a date or None.
    """
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.strip()[:10]).date()
    except ValueError:
        return None


def date_from_url(url):
    """NPR story URLs carry their publish date as /YYYY/MM/DD/."""
    match = URL_DATE_RE.search(url or "")
    if not match:
        return None
    try:
        return date(*(int(g) for g in match.groups()))
    except ValueError:
        return None


def format_archive_date(d):
    """The archive listing takes its anchor date as MM-DD-YYYY."""
    return d.strftime("%m-%d-%Y")
