from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.responses import envelope
from app.dependencies import get_db
from app.schemas.inventory import InventoryItemResponse, InventoryListResponse, InventoryRead, InventoryUpdate
from app.services.inventory_service import list_inventory, update_inventory_item

router = APIRouter(prefix="/api/inventory", tags=["Inventory"])


@router.get("", response_model=InventoryListResponse, response_model_exclude_unset=True)
def inventory_list(db: Session = Depends(get_db)):
    return envelope([InventoryRead.model_validate(item) for item in list_inventory(db)])


@router.put("/{item_id}", response_model=InventoryItemResponse, response_model_exclude_unset=True)
def inventory_update(item_id: int, payload: InventoryUpdate, db: Session = Depends(get_db)):
    changes, item = update_inventory_item(db, item_id, payload)
    data = InventoryRead.model_validate(item) if item is not None else None
    return envelope(data, changes=changes)


__all__ = ["router"]
