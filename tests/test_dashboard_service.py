import unittest
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.orm import sessionmaker

from app.database.engine import create_store_engine, init_db
from app.models.category import Category, CategorySale
from app.models.inventory import InventoryItem
from app.models.transaction import Transaction
from app.services.dashboard_service import (
    clamp_months,
    get_category_sales,
    get_revenue_series,
    get_stats,
    round_half_up,
)


def _tx(day, tx_type, debit, credit=0, reference="REF", account="Sales"):
    return Transaction(
        date=day.isoformat(),
        reference=reference,
        type=tx_type,
        account=account,
        debit=debit,
        credit=credit,
    )


class DashboardServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine = create_store_engine("sqlite://")
        init_db(self.engine)
        self.db = sessionmaker(bind=self.engine, expire_on_commit=False)()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_stats_on_empty_store_are_zero(self):
        stats = get_stats(self.db)
        self.assertEqual(stats.revenue, 0)
        self.assertEqual(stats.expenses, 0)
        self.assertEqual(stats.profit, 0)
        self.assertEqual(stats.stock, 0)

    def test_stats_profit_is_revenue_minus_expenses(self):
        self.db.add_all(
            [
                _tx(date(2024, 1, 5), "invoice", 100),
                _tx(date(2024, 2, 10), "expense", 40),
                _tx(date(2024, 2, 11), "payment", 999),
                InventoryItem(sku="A-1", name="Widget", stock=7),
                InventoryItem(sku="A-2", name="Gadget", stock=5),
            ]
        )
        self.db.commit()

        stats = get_stats(self.db)
        self.assertEqual(stats.revenue, 100)
        self.assertEqual(stats.expenses, 40)
        self.assertEqual(stats.profit, 60)
        self.assertEqual(stats.stock, 12)

    def test_revenue_series_buckets_oldest_first(self):
        self.db.add_all(
            [
                _tx(date(2023, 12, 31), "invoice", 999),
                _tx(date(2024, 1, 5), "invoice", 100.4),
                _tx(date(2024, 1, 20), "invoice", 50.2),
                _tx(date(2024, 2, 10), "expense", 40),
                _tx(date(2024, 3, 1), "payment", 70),
            ]
        )
        self.db.commit()

        series = get_revenue_series(self.db, months_count=3, today=date(2024, 3, 15))
        self.assertEqual(series.months, ["2024-01", "2024-02", "2024-03"])
        self.assertEqual(series.labels, ["Jan", "Feb", "Mar"])
        self.assertEqual(series.revenue, [151, 0, 0])
        self.assertEqual(series.expenses, [0, 40, 0])

    def test_unpadded_dates_count_in_stats_but_not_in_buckets(self):
        self.db.add_all(
            [
                Transaction(date="2024-1-5", reference="OLD", type="invoice", account="Sales", debit=30),
                _tx(date(2024, 1, 6), "invoice", 20),
            ]
        )
        self.db.commit()

        self.assertEqual(get_stats(self.db).revenue, 50)
        series = get_revenue_series(self.db, months_count=2, today=date(2024, 2, 1))
        self.assertEqual(series.revenue, [20, 0])

    def test_revenue_series_without_transactions_is_all_zero(self):
        series = get_revenue_series(self.db, months_count=6, today=date(2024, 2, 1))
        self.assertEqual(len(series.months), 6)
        self.assertEqual(series.months[0], "2023-09")
        self.assertEqual(series.months[-1], "2024-02")
        self.assertEqual(series.revenue, [0] * 6)
        self.assertEqual(series.expenses, [0] * 6)

    def test_revenue_series_defaults_and_clamps_window(self):
        self.assertEqual(len(get_revenue_series(self.db, today=date(2024, 2, 1)).months), 6)
        self.assertEqual(len(get_revenue_series(self.db, months_count=0).months), 1)
        self.assertEqual(len(get_revenue_series(self.db, months_count=-4).months), 1)
        self.assertEqual(len(get_revenue_series(self.db, months_count=1000).months), 36)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(clamp_months(12, maximum=10), 10)

    def _seed_categories(self):
        electronics = Category(name="Electronics")
        furniture = Category(name="Furniture")
        services = Category(name="Services")
        self.db.add_all([electronics, furniture, services])
        self.db.flush()
        self.db.add_all(
            [
                CategorySale(category_id=electronics.id, month="2024-03", amount=100),
                CategorySale(category_id=electronics.id, month="2024-03", amount=50),
                CategorySale(category_id=furniture.id, month="2024-03", amount=200),
                CategorySale(category_id=services.id, month="2024-02", amount=500),
            ]
        )
        self.db.commit()
        return electronics, furniture, services

    def test_category_sales_include_every_category(self):
        self._seed_categories()

        rows = get_category_sales(self.db, month="2024-03")
        self.assertEqual(
            [(row.name, row.total) for row in rows],
            [("Furniture", 200), ("Electronics", 150), ("Services", 0)],
        )
        self.assertEqual(sum(row.total for row in rows), 350)

    def test_category_sales_for_empty_month_ties_break_on_id(self):
        electronics, furniture, services = self._seed_categories()

        rows = get_category_sales(self.db, month="2023-01")
        self.assertEqual([row.id for row in rows], [electronics.id, furniture.id, services.id])
        self.assertTrue(all(row.total == 0 for row in rows))

    def test_category_sales_default_to_current_month(self):
        electronics, _, _ = self._seed_categories()
        self.db.add(CategorySale(category_id=electronics.id, month="2024-05", amount=75))
        self.db.commit()

        rows = get_category_sales(self.db, today=date(2024, 5, 20))
        self.assertEqual(rows[0].name, "Electronics")
        self.assertEqual(rows[0].total, 75)

    def test_category_sales_rejects_malformed_month(self):
        with self.assertRaises(ValueError):
            get_category_sales(self.db, month="2024-3")

    def test_deleting_category_cascades_to_sales(self):
        _, _, services = self._seed_categories()

        self.db.execute(delete(Category).where(Category.id == services.id))
        self.db.commit()

        remaining = self.db.execute(
            select(CategorySale).where(CategorySale.category_id == services.id)
        ).scalars().all()
        self.assertEqual(remaining, [])


if __name__ == "__main__":
    unittest.main()
