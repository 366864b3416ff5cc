import csv
import io
import unittest
from datetime import date

from sqlalchemy.orm import sessionmaker

from app.database.engine import create_store_engine, init_db
from app.schemas.transaction import TransactionCreate, TransactionUpdate
from app.services.transaction_service import (
    clamp_page,
    create_transaction,
    delete_transaction,
    export_transactions_csv,
    format_amount,
    list_transactions,
    update_transaction,
)


def _payload(**overrides):
    values = {
        "date": "2024-01-05",
        "reference": "INV-001",
        "type": "invoice",
        "account": "Sales",
        "debit": 100,
    }
    values.update(overrides)
    return TransactionCreate(**values)


class TransactionServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine = create_store_engine("sqlite://")
        init_db(self.engine)
        self.db = sessionmaker(bind=self.engine, expire_on_commit=False)()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_create_then_list_returns_row(self):
        created = create_transaction(self.db, _payload(credit=12.5))

        rows = list_transactions(self.db)
        self.assertEqual(len(rows), 1)
        row = rows[0]
        self.assertEqual(row.id, created.id)
        self.assertEqual(row.date, "2024-01-05")
        self.assertEqual(row.reference, "INV-001")
        self.assertEqual(row.type, "invoice")
        self.assertEqual(row.account, "Sales")
        self.assertEqual(row.debit, 100)
        self.assertEqual(row.credit, 12.5)
        self.assertIsNotNone(row.created_at)

    def test_debit_and_credit_default_to_zero(self):
        created = create_transaction(
            self.db,
            TransactionCreate(date="2024-01-05", reference="R", type="expense", account="Rent"),
        )
        self.assertEqual(created.debit, 0)
        self.assertEqual(created.credit, 0)

    def test_ids_keep_increasing_after_delete(self):
        first = create_transaction(self.db, _payload())
        second = create_transaction(self.db, _payload(reference="INV-002"))
        self.assertGreater(second.id, first.id)

        self.assertEqual(delete_transaction(self.db, second.id), 1)
        third = create_transaction(self.db, _payload(reference="INV-003"))
        self.assertGreater(third.id, second.id)

    def test_list_orders_by_date_then_id_descending(self):
        a = create_transaction(self.db, _payload(date="2024-01-05", reference="A"))
        b = create_transaction(self.db, _payload(date="2024-03-01", reference="B"))
        c = create_transaction(self.db, _payload(date="2024-01-05", reference="C"))

        ids = [row.id for row in list_transactions(self.db)]
        self.assertEqual(ids, [b.id, c.id, a.id])

    def test_list_search_matches_reference_account_or_date(self):
        create_transaction(self.db, _payload(reference="Consulting March", account="Sales"))
        create_transaction(self.db, _payload(reference="INV-9", account="Consulting Income"))
        create_transaction(self.db, _payload(date="2023-07-14", reference="X", account="Bank"))

        self.assertEqual(len(list_transactions(self.db, q="Consulting")), 2)
        self.assertEqual(len(list_transactions(self.db, q=" 2023-07 ")), 1)
        self.assertEqual(list_transactions(self.db, q="nothing-here"), [])

    def test_list_filters_by_type(self):
        create_transaction(self.db, _payload(type="invoice"))
        create_transaction(self.db, _payload(type="expense"))
        create_transaction(self.db, _payload(type="expense"))

        self.assertEqual(len(list_transactions(self.db, tx_type="expense")), 2)
        self.assertEqual(len(list_transactions(self.db, tx_type="  ")), 3)

    def test_list_paginates(self):
        for day in range(1, 6):
            create_transaction(self.db, _payload(date=date(2024, 1, day).isoformat()))

        page = list_transactions(self.db, limit=2, offset=1)
        self.assertEqual([row.date for row in page], ["2024-01-04", "2024-01-03"])

    def test_clamp_page(self):
        self.assertEqual(clamp_page(None, None), (100, 0))
        self.assertEqual(clamp_page(0, -5), (1, 0))
        self.assertEqual(clamp_page(50000, 3, max_limit=1000), (1000, 3))

    def test_update_replaces_fields(self):
        created = create_transaction(self.db, _payload())

        changes, updated = update_transaction(
            self.db,
            created.id,
            TransactionUpdate(
                date="2024-02-01",
                reference="INV-001-R",
                type="expense",
                account="Supplies",
                debit=30,
            ),
        )
        self.assertEqual(changes, 1)
        self.assertEqual(updated.reference, "INV-001-R")
        self.assertEqual(updated.type, "expense")
        self.assertEqual(updated.date, "2024-02-01")
        self.assertEqual(updated.debit, 30)
        self.assertEqual(updated.credit, 0)

    def test_update_missing_id_reports_zero_changes(self):
        changes, updated = update_transaction(self.db, 999, TransactionUpdate(**_payload().model_dump()))
        self.assertEqual(changes, 0)
        self.assertIsNone(updated)

    def test_delete_missing_id_reports_zero_changes(self):
        self.assertEqual(delete_transaction(self.db, 12345), 0)

    def test_export_quotes_fields(self):
        create_transaction(
            self.db,
            _payload(reference='Say "hi"', account="Cash, petty", debit=100, credit=2.5),
        )
        create_transaction(self.db, _payload(date="2024-02-01", reference="Later", debit=1))

        document = export_transactions_csv(self.db)
        lines = document.splitlines()
        self.assertEqual(lines[0], "Date,Reference,Type,Account,Debit,Credit")
        self.assertTrue(lines[1].startswith('"2024-02-01","Later"'))
        self.assertEqual(
            lines[2],
            '"2024-01-05","Say ""hi""","invoice","Cash, petty","100","2.5"',
        )

        rows = list(csv.reader(io.StringIO(document)))
        self.assertTrue(all(len(row) == 6 for row in rows))
        self.assertEqual(rows[2][1], 'Say "hi"')
        self.assertEqual(rows[2][3], "Cash, petty")

    def test_export_of_empty_store_is_header_only(self):
        self.assertEqual(
            export_transactions_csv(self.db),
            "Date,Reference,Type,Account,Debit,Credit\n",
        )

    def test_format_amount(self):
        self.assertEqual(format_amount(100.0), "100")
        self.assertEqual(format_amount(12.25), "12.25")
        self.assertEqual(format_amount(None), "0")


if __name__ == "__main__":
    unittest.main()
