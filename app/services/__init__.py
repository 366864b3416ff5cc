from app.services.dashboard_service import get_category_sales, get_revenue_series, get_stats
from app.services.inventory_service import list_inventory, update_inventory_item
from app.services.transaction_service import (
    create_transaction,
    delete_transaction,
    iter_transactions_csv,
    list_transactions,
    update_transaction,
)

__all__ = [
    "create_transaction",
    "delete_transaction",
    "get_category_sales",
    "get_revenue_series",
    "get_stats",
    "iter_transactions_csv",
    "list_inventory",
    "list_transactions",
    "update_inventory_item",
    "update_transaction",
]
