# runway/schemas/transaction.py
from typing import List, Optional
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime
import uuid

from runway.models.transaction import TransactionType
from runway.schemas.validators import reject_explicit_nulls, to_local_naive

class TransactionBase(BaseModel):
    account_id: uuid.UUID
    # Validated here so aggregations never see a malformed amount
    amount: Decimal = Field(..., max_digits=12, decimal_places=2, description="Signed amount, e.g. -2847.00")
    description: str = Field(..., min_length=1, description="E.g. AWS Services")
    category: Optional[str] = None
    subcategory: Optional[str] = None
    date: datetime = Field(..., description="ISO 8601 date/time of transaction")
    type: TransactionType
    is_recurring: bool = False
    tags: Optional[List[str]] = None

    class Config:
        use_enum_values = True

    @field_validator("date")
    @classmethod
    def date_to_local_naive(cls, value: datetime) -> datetime:
        return to_local_naive(value)

class TransactionCreate(TransactionBase):
    external_id: Optional[str] = None

class TransactionUpdate(BaseModel):
    amount: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    subcategory: Optional[str] = None
    date: Optional[datetime] = None
    type: Optional[TransactionType] = None
    is_recurring: Optional[bool] = None
    tags: Optional[List[str]] = None

    class Config:
        use_enum_values = True

    @field_validator("date")
    @classmethod
    def date_to_local_naive(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_local_naive(value)

    @model_validator(mode="after")
    def required_columns_not_null(self):
        return reject_explicit_nulls(self, "amount", "description", "date", "type", "is_recurring")

class TransactionRead(TransactionBase):
    id: uuid.UUID
    user_id: uuid.UUID
    external_id: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class TransactionBulkUpdate(BaseModel):
    ids: List[uuid.UUID] = Field(..., min_length=1)
    updates: TransactionUpdate
