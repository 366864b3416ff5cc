import math
from datetime import date

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.constants import TYPE_EXPENSE, TYPE_INVOICE
from app.core.dates import current_month_key, is_month_key, month_label, month_start, month_window
from app.models.category import Category, CategorySale
from app.models.inventory import InventoryItem
from app.models.transaction import Transaction
from app.schemas.dashboard import CategorySalesRead, RevenueSeriesRead, StatsRead


def _debit_total(db: Session, tx_type: str):
    return db.execute(
        select(func.coalesce(func.sum(Transaction.debit), 0)).where(Transaction.type == tx_type)
    ).scalar_one()


def get_stats(db: Session) -> StatsRead:
    revenue = _debit_total(db, TYPE_INVOICE) or 0
    expenses = _debit_total(db, TYPE_EXPENSE) or 0
    stock = db.execute(select(func.coalesce(func.sum(InventoryItem.stock), 0))).scalar_one() or 0
    return StatsRead(
        revenue=revenue,
        expenses=expenses,
        profit=revenue - expenses,
        stock=stock,
    )


def round_half_up(value) -> int:
    return int(math.floor(float(value) + 0.5))


def clamp_months(months_count, maximum: int | None = None) -> int:
    if maximum is None:
        maximum = get_settings().REVENUE_SERIES_MAX_MONTHS
    return max(1, min(int(months_count), maximum))


def get_revenue_series(db: Session, months_count: int | None = None, today: date | None = None) -> RevenueSeriesRead:
    """
    Monthly invoice/expense debit totals for the ``months_count`` months
    ending at the current one, oldest first.

    The store is read once: rows on or after the first day of the oldest
    month are grouped by (month, type) and folded into per-type maps, then
    every bucket is looked up with a 0 default.
    """
    settings = get_settings()
    if months_count is None:
        months_count = settings.REVENUE_SERIES_DEFAULT_MONTHS
    months_count = clamp_months(months_count, settings.REVENUE_SERIES_MAX_MONTHS)

    months = month_window(months_count, today)
    month_expr = func.substr(Transaction.date, 1, 7)

    rows = db.execute(
        select(
            month_expr.label("month"),
            Transaction.type,
            func.coalesce(func.sum(Transaction.debit), 0).label("amount"),
        )
        .where(
            Transaction.type.in_((TYPE_INVOICE, TYPE_EXPENSE)),
            Transaction.date >= month_start(months[0]).isoformat(),
        )
        .group_by(month_expr, Transaction.type)
    ).all()

    totals = {TYPE_INVOICE: {}, TYPE_EXPENSE: {}}
    for row in rows:
        totals[row.type][row.month] = row.amount

    def _bucket(tx_type, key):
        amount = totals[tx_type].get(key)
        return round_half_up(amount) if amount else 0

    return RevenueSeriesRead(
        labels=[month_label(key) for key in months],
        months=months,
        revenue=[_bucket(TYPE_INVOICE, key) for key in months],
        expenses=[_bucket(TYPE_EXPENSE, key) for key in months],
    )


def get_category_sales(db: Session, month: str | None = None, today: date | None = None) -> list[CategorySalesRead]:
    month = month or current_month_key(today)
    if not is_month_key(month):
        raise ValueError("month must look like YYYY-MM, got {!r}".format(month))
    total = func.coalesce(func.sum(CategorySale.amount), 0).label("total")
    rows = db.execute(
        select(Category.id, Category.name, total)
        .select_from(Category)
        .outerjoin(
            CategorySale,
            and_(CategorySale.category_id == Category.id, CategorySale.month == month),
        )
        .group_by(Category.id, Category.name)
        .order_by(total.desc(), Category.id.asc())
    ).all()
    return [CategorySalesRead(id=row.id, name=row.name, total=row.total) for row in rows]


__all__ = [
    "clamp_months",
    "get_category_sales",
    "get_revenue_series",
    "get_stats",
    "round_half_up",
]
