from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.responses import envelope
from app.dependencies import get_db, limit_param, offset_param
from app.schemas.common import Envelope
from app.schemas.transaction import (
    TransactionCreate,
    TransactionListResponse,
    TransactionRead,
    TransactionResponse,
    TransactionUpdate,
)
from app.services.transaction_service import (
    create_transaction,
    delete_transaction,
    iter_transactions_csv,
    list_transactions,
    update_transaction,
)

router = APIRouter(prefix="/api/transactions", tags=["Transactions"])


class TransactionDeleteResponse(Envelope):
    changes: int


def _read(transaction):
    if transaction is None:
        return None
    return TransactionRead.model_validate(transaction)


@router.get("", response_model=TransactionListResponse, response_model_exclude_unset=True)
def transactions_list(
    q: str | None = Query(None, description="Matches reference, account or date"),
    tx_type: str | None = Query(None, alias="type", description="Exact transaction type"),
    limit: int | None = Depends(limit_param),
    offset: int = Depends(offset_param),
    db: Session = Depends(get_db),
):
    rows = list_transactions(db, q=q, tx_type=tx_type, limit=limit, offset=offset)
    return envelope([_read(row) for row in rows])


@router.post("", response_model=TransactionResponse, response_model_exclude_unset=True)
def transactions_create(payload: TransactionCreate, db: Session = Depends(get_db)):
    return envelope(_read(create_transaction(db, payload)))


@router.get("/export")
def transactions_export(db: Session = Depends(get_db)):
    filename = get_settings().EXPORT_FILENAME
    return StreamingResponse(
        iter_transactions_csv(db),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(filename)},
    )


@router.put("/{transaction_id}", response_model=TransactionResponse, response_model_exclude_unset=True)
def transactions_update(
    transaction_id: int,
    payload: TransactionUpdate,
    db: Session = Depends(get_db),
):
    changes, transaction = update_transaction(db, transaction_id, payload)
    return envelope(_read(transaction), changes=changes)


@router.delete("/{transaction_id}", response_model=TransactionDeleteResponse, response_model_exclude_unset=True)
def transactions_delete(transaction_id: int, db: Session = Depends(get_db)):
    return envelope(changes=delete_transaction(db, transaction_id))


__all__ = ["router"]
