import csv
import io
import logging
from typing import Iterator

from sqlalchemy import delete, or_, select, update
from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.constants import EXPORT_HEADER
from app.models.transaction import Transaction
from app.schemas.transaction import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)


def clamp_page(limit, offset, max_limit: int | None = None) -> tuple[int, int]:
    settings = get_settings()
    if max_limit is None:
        max_limit = settings.TRANSACTIONS_MAX_LIMIT
    if limit is None:
        limit = settings.TRANSACTIONS_DEFAULT_LIMIT
    limit = max(1, min(int(limit), max_limit))
    offset = max(0, int(offset or 0))
    return limit, offset


def list_transactions(
    db: Session,
    q: str | None = None,
    tx_type: str | None = None,
    limit: int | None = None,
    offset: int | None = 0,
) -> list[Transaction]:
    limit, offset = clamp_page(limit, offset)
    stmt = select(Transaction)

    tx_type = (tx_type or "").strip()
    if tx_type:
        stmt = stmt.where(Transaction.type == tx_type)

    q = (q or "").strip()
    if q:
        pattern = "%{}%".format(q)
        stmt = stmt.where(
            or_(
                Transaction.reference.like(pattern),
                Transaction.account.like(pattern),
                Transaction.date.like(pattern),
            )
        )

    stmt = (
        stmt.order_by(Transaction.date.desc(), Transaction.id.desc())
        .limit(limit)
        .offset(offset)
    )
    return list(db.execute(stmt).scalars().all())


def create_transaction(db: Session, payload: TransactionCreate) -> Transaction:
    transaction = Transaction(**payload.to_row())
    db.add(transaction)
    db.commit()
    db.refresh(transaction)
    logger.info("Created transaction %s (%s)", transaction.id, transaction.type)
    return transaction


def update_transaction(
    db: Session,
    transaction_id: int,
    payload: TransactionUpdate,
) -> tuple[int, Transaction | None]:
    result = db.execute(
        update(Transaction)
        .where(Transaction.id == transaction_id)
        .values(**payload.to_row())
        .execution_options(synchronize_session=False)
    )
    db.commit()
    changes = result.rowcount or 0
    if changes:
        logger.info("Updated transaction %s", transaction_id)
    transaction = db.get(Transaction, transaction_id, populate_existing=True)
    return changes, transaction


def delete_transaction(db: Session, transaction_id: int) -> int:
    result = db.execute(
        delete(Transaction)
        .where(Transaction.id == transaction_id)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    changes = result.rowcount or 0
    if changes:
        logger.info("Deleted transaction %s", transaction_id)
    return changes


def format_amount(value) -> str:
    if value is None:
        return "0"
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _csv_line(writer, buffer: io.StringIO, values) -> str:
    writer.writerow(values)
    line = buffer.getvalue()
    buffer.seek(0)
    buffer.truncate(0)
    return line


def iter_transactions_csv(db: Session) -> Iterator[str]:
    """
    Export lines, newest first. Rows are fetched before the first line is
    yielded so the iterator outlives the request session.

    Every data field is quoted; embedded quotes are doubled so commas and
    line breaks inside a reference or account stay inside their field.
    """
    rows = db.execute(
        select(
            Transaction.date,
            Transaction.reference,
            Transaction.type,
            Transaction.account,
            Transaction.debit,
            Transaction.credit,
        ).order_by(Transaction.date.desc(), Transaction.id.desc())
    ).all()
    return _render_csv(rows)


def _render_csv(rows) -> Iterator[str]:
    buffer = io.StringIO()
    header_writer = csv.writer(buffer, lineterminator="\n")
    yield _csv_line(header_writer, buffer, EXPORT_HEADER)

    row_writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        yield _csv_line(
            row_writer,
            buffer,
            (
                row.date,
                row.reference,
                row.type,
                row.account,
                format_amount(row.debit),
                format_amount(row.credit),
            ),
        )


def export_transactions_csv(db: Session) -> str:
    return "".join(iter_transactions_csv(db))


__all__ = [
    "clamp_page",
    "create_transaction",
    "delete_transaction",
    "export_transactions_csv",
    "format_amount",
    "iter_transactions_csv",
    "list_transactions",
    "update_transaction",
]
