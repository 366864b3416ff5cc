import importlib

from app.models.category import Category, CategorySale
from app.models.inventory import InventoryItem
from app.models.transaction import Transaction


def import_all_models() -> None:
    for module_name in (
        "app.models.category",
        "app.models.inventory",
        "app.models.transaction",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Category",
    "CategorySale",
    "InventoryItem",
    "Transaction",
    "import_all_models",
]
