import re
from datetime import date

from app.core.exceptions import ValidationError

MONTH_YEAR_FORMAT = "MM-YYYY"
_MONTH_YEAR_RE = re.compile(r"(0[1-9]|1[0-2])-([0-9]{4})")


def parse_month_year(value: str, field: str = "date") -> date:
    """
    Parses a "MM-YYYY" string into the first day of that month.

    Only two-digit months 01-12 and four-digit years are accepted.
    """
    match = _MONTH_YEAR_RE.fullmatch(value) if isinstance(value, str) else None
    if not match or int(match.group(2)) == 0:
        raise ValidationError(f"invalid {field} format, expected {MONTH_YEAR_FORMAT}")

    month, year = match.groups()
    return date(int(year), int(month), 1)


def format_month_year(value: date) -> str:
    return f"{value.month:02d}-{value.year:04d}"
