import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.models.inventory import InventoryItem
from app.schemas.inventory import InventoryUpdate

logger = logging.getLogger(__name__)


def list_inventory(db: Session) -> list[InventoryItem]:
    # lowest stock first so reorder candidates lead the list
    items = db.execute(
        select(InventoryItem).order_by(InventoryItem.stock.asc(), InventoryItem.id.asc())
    ).scalars().all()
    return list(items)


def update_inventory_item(
    db: Session,
    item_id: int,
    payload: InventoryUpdate,
) -> tuple[int, InventoryItem | None]:
    result = db.execute(
        update(InventoryItem)
        .where(InventoryItem.id == item_id)
        .values(
            stock=payload.stock,
            reorder_level=payload.reorder_level,
            status=payload.status,
        )
        .execution_options(synchronize_session=False)
    )
    db.commit()
    changes = result.rowcount or 0
    if changes:
        logger.info(
            "Updated inventory item %s (stock=%s, reorder_level=%s, status=%s)",
            item_id,
            payload.stock,
            payload.reorder_level,
            payload.status,
        )
    item = db.get(InventoryItem, item_id, populate_existing=True)
    return changes, item


__all__ = ["list_inventory", "update_inventory_item"]
