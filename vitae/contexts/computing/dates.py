"""
Date Fields

Parsing of free-form resume dates and their localized display forms.
"""

from datetime import date, datetime
from typing import Any, Optional

from vitae.contexts.localization import get_date_conventions

# Tried in order after ISO parsing fails
DATE_FORMATS = [
    "%Y-%m",
    "%Y",
    "%Y/%m/%d",
    "%Y/%m",
    "%Y.%m.%d",
    "%Y.%m",
    "%b %Y",
    "%B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%m/%d/%Y",
    "%m/%Y",
]

# Separator between the two ends of a closed date range
DATE_RANGE_SEPARATOR = " -- "


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a resume date into a calendar date.

    Accepts date/datetime objects, bare years (int or str), ISO dates and
    timestamps, and the common written forms in DATE_FORMATS. Missing
    components default to the first month or day.

    Args:
        value: Raw date field

    Returns:
        Parsed date, or None if value is empty or unrecognized
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return date(value, 1, 1) if 1 <= value <= 9999 else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None


def localize_date(value: Any, locale: Optional[str]) -> str:
    """
    Format a date as localized short month plus year.

    Args:
        value: Raw date field
        locale: Locale code

    Returns:
        Display string such as "Apr 2021" or "2021年4月"; "" for empty or
        unparseable input

    Example:
        >>> localize_date("2021-04-15", "en")
        'Apr 2021'
        >>> localize_date("2021-04", "zh-hans")
        '2021年4月'
    """
    parsed = parse_date(value)
    if parsed is None:
        return ""

    conventions = get_date_conventions(locale)
    month = conventions["months"][parsed.month - 1]
    return conventions["format"].format(month=month, month_number=parsed.month, year=parsed.year)


def get_date_range(start: Any, end: Any, locale: Optional[str]) -> str:
    """
    Format a start/end pair as a localized date range.

    An empty (or unparseable) start yields "". An empty end means the entry is
    ongoing and uses the locale's present-phrasing.

    Args:
        start: Raw start date
        end: Raw end date
        locale: Locale code

    Returns:
        Display string such as "Apr 2021 -- Mar 2023", "Apr 2021 -- Present"
        or "2021年4月至今"
    """
    start_text = localize_date(start, locale)
    if not start_text:
        return ""

    end_text = localize_date(end, locale)
    if not end_text:
        return get_date_conventions(locale)["present"].format(start=start_text)

    return f"{start_text}{DATE_RANGE_SEPARATOR}{end_text}"
