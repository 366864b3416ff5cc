from sqlalchemy import Column, Index, Integer, String

from app.core.constants import DEFAULT_INVENTORY_STATUS
from app.database.base import Base


class InventoryItem(Base):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True)

    sku = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)

    stock = Column(Integer, nullable=False, default=0)
    reorder_level = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default=DEFAULT_INVENTORY_STATUS)

    __table_args__ = (
        Index("idx_inventory_stock", "stock"),
    )


__all__ = ["InventoryItem"]
