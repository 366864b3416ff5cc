from datetime import date as date_type, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.schemas.common import Amount, Envelope


class TransactionBase(BaseModel):
    date: date_type
    reference: str = Field(min_length=1)
    type: str = Field(min_length=1)
    account: str = Field(min_length=1)
    debit: float = Field(default=0, ge=0)
    credit: float = Field(default=0, ge=0)

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("date", "reference", "type", "account", mode="before")
    @classmethod
    def blank_counts_as_missing(cls, value):
        if value is None:
            raise PydanticCustomError("missing", "Field required")
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise PydanticCustomError("missing", "Field required")
        return value

    def to_row(self) -> dict:
        """Column values, with the date stored as ISO ``YYYY-MM-DD`` text."""
        return self.model_dump(mode="json")


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(TransactionBase):
    pass


class TransactionRead(BaseModel):
    id: int
    # stored text is returned as-is, including dates saved by older clients
    date: str
    reference: str
    type: str
    account: str
    debit: Optional[Amount] = None
    credit: Optional[Amount] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransactionResponse(Envelope):
    data: Optional[TransactionRead] = None
    changes: Optional[int] = None


class TransactionListResponse(Envelope):
    data: List[TransactionRead]
