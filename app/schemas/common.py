from typing import Annotated, Optional

from pydantic import BaseModel, PlainSerializer


def _compact_number(value):
    # 100.0 goes out as 100, fractional amounts are left alone
    if value is not None and float(value).is_integer():
        return int(value)
    return value


Amount = Annotated[float, PlainSerializer(_compact_number)]


class Envelope(BaseModel):
    """Fields every JSON response carries; routes add ``data``/``changes``."""

    success: bool = True
    message: Optional[str] = None
