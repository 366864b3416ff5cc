import calendar
import re
from datetime import date

MONTH_KEY_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
_MONTH_KEY_RE = re.compile(MONTH_KEY_PATTERN)


def month_key(value: date) -> str:
    return "{:04d}-{:02d}".format(value.year, value.month)


def current_month_key(today: date | None = None) -> str:
    return month_key(today or date.today())


def is_month_key(value) -> bool:
    if not isinstance(value, str):
        return False
    return bool(_MONTH_KEY_RE.match(value))


def shift_month(value: date, months: int) -> date:
    """First day of the month ``months`` away from ``value`` (negative goes back)."""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_window(months_count: int, today: date | None = None) -> list[str]:
    """Consecutive month keys ending at the month of ``today``, oldest first."""
    anchor = today or date.today()
    return [
        month_key(shift_month(anchor, -offset))
        for offset in range(months_count - 1, -1, -1)
    ]


def month_label(key: str) -> str:
    month = int(key.split("-")[1])
    return calendar.month_abbr[month]


def month_start(key: str) -> date:
    year, month = key.split("-")
    return date(int(year), int(month), 1)
