from typing import Optional

from fastapi import HTTPException, Query

from app.core.dates import is_month_key
from app.database.session import get_db


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _invalid(field: str) -> HTTPException:
    return HTTPException(status_code=400, detail="Invalid fields: {}".format(field))


def _optional_int(value: Optional[str], field: str) -> Optional[int]:
    value = _blank_to_none(value)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise _invalid(field) from None


def months_param(
    months: Optional[str] = Query(None, description="Number of months, oldest first"),
) -> Optional[int]:
    # "?months=" falls back to the configured default
    return _optional_int(months, "months")


def month_param(
    month: Optional[str] = Query(None, description="YYYY-MM, defaults to the current month"),
) -> Optional[str]:
    month = _blank_to_none(month)
    if month is not None and not is_month_key(month):
        raise _invalid("month")
    return month


def limit_param(limit: Optional[str] = Query(None, description="Page size")) -> Optional[int]:
    return _optional_int(limit, "limit")


def offset_param(offset: Optional[str] = Query(None, description="Rows to skip")) -> int:
    return _optional_int(offset, "offset") or 0


__all__ = ["get_db", "limit_param", "month_param", "months_param", "offset_param"]
