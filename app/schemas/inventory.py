from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import Envelope


class InventoryUpdate(BaseModel):
    stock: int
    reorder_level: int
    status: str = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class InventoryRead(BaseModel):
    id: int
    sku: str
    name: str
    # rows written by older clients may hold NULLs here
    stock: Optional[int] = None
    reorder_level: Optional[int] = None
    status: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class InventoryListResponse(Envelope):
    data: List[InventoryRead]


class InventoryItemResponse(Envelope):
    data: Optional[InventoryRead] = None
    changes: Optional[int] = None
