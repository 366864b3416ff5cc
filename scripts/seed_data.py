import argparse
import logging
from datetime import date

from sqlalchemy import delete, select

from app.core.dates import month_window
from app.core.logging import setup_logging
from app.database import SessionLocal, engine, init_db
from app.models.category import Category, CategorySale
from app.models.inventory import InventoryItem
from app.models.transaction import Transaction

logger = logging.getLogger(__name__)

_INVENTORY = (
    ("SKU-1001", "Wireless Mouse", 42, 10),
    ("SKU-1002", "USB-C Dock", 6, 8),
    ("SKU-1003", "27in Monitor", 14, 5),
    ("SKU-1004", "Mechanical Keyboard", 3, 6),
)

_CATEGORIES = ("Electronics", "Accessories", "Furniture", "Services")


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample dashboard data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    parser.add_argument(
        "--months",
        type=int,
        default=6,
        help="Months of sample transactions and category sales to create.",
    )
    return parser.parse_args()


def _sample_transactions(months):
    transactions = []
    for index, key in enumerate(months):
        year, month = (int(part) for part in key.split("-"))
        transactions.append(
            Transaction(
                date=date(year, month, 5).isoformat(),
                reference="INV-{}".format(key.replace("-", "")),
                type="invoice",
                account="Sales",
                debit=12000 + index * 1500,
            )
        )
        transactions.append(
            Transaction(
                date=date(year, month, 20).isoformat(),
                reference="EXP-{}".format(key.replace("-", "")),
                type="expense",
                account="Operating Expenses",
                debit=7000 + index * 400,
            )
        )
    return transactions


def main():
    setup_logging()
    args = parse_args()

    init_db(engine)

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(CategorySale))
            db.execute(delete(Category))
            db.execute(delete(InventoryItem))
            db.execute(delete(Transaction))
            db.commit()

        has_inventory = db.execute(select(InventoryItem.id).limit(1)).first()
        if has_inventory:
            logger.info("Seed skipped: inventory already exists.")
            return

        db.add_all(
            InventoryItem(sku=sku, name=name, stock=stock, reorder_level=reorder_level)
            for sku, name, stock, reorder_level in _INVENTORY
        )

        categories = [Category(name=name) for name in _CATEGORIES]
        db.add_all(categories)
        db.flush()

        months = month_window(max(1, args.months))
        for offset, key in enumerate(months):
            for rank, category in enumerate(categories):
                db.add(
                    CategorySale(
                        category_id=category.id,
                        month=key,
                        amount=float(5000 - rank * 1000 + offset * 250),
                    )
                )

        db.add_all(_sample_transactions(months))
        db.commit()
        logger.info(
            "Seed data created: %d items, %d categories, months %s..%s",
            len(_INVENTORY),
            len(categories),
            months[0],
            months[-1],
        )
    finally:
        db.close()


if __name__ == "__main__":
    main()
