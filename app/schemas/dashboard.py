from typing import List

from pydantic import BaseModel

from app.schemas.common import Amount, Envelope


class StatsRead(BaseModel):
    revenue: Amount
    expenses: Amount
    profit: Amount
    stock: int


class RevenueSeriesRead(BaseModel):
    labels: List[str]
    months: List[str]
    revenue: List[int]
    expenses: List[int]


class CategorySalesRead(BaseModel):
    id: int
    name: str
    total: Amount


class StatsResponse(Envelope):
    data: StatsRead


class RevenueSeriesResponse(Envelope):
    data: RevenueSeriesRead


class CategorySalesResponse(Envelope):
    data: List[CategorySalesRead]
