# runway/schemas/account.py
from typing import Optional
from decimal import Decimal
from pydantic import BaseModel, Field, model_validator
from datetime import datetime
import uuid

from runway.models.account import AccountType
from runway.schemas.validators import reject_explicit_nulls

class AccountBase(BaseModel):
    name: str = Field(..., min_length=1, description="E.g. Chase Business Checking")
    type: AccountType
    balance: Decimal = Field(Decimal("0"), max_digits=12, decimal_places=2)
    currency: str = Field("USD", min_length=3, max_length=3)
    bank_name: Optional[str] = None
    is_active: bool = True

    class Config:
        use_enum_values = True

class AccountCreate(AccountBase):
    pass

class AccountUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    type: Optional[AccountType] = None
    balance: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    bank_name: Optional[str] = None
    is_active: Optional[bool] = None

    class Config:
        use_enum_values = True

    @model_validator(mode="after")
    def required_columns_not_null(self):
        return reject_explicit_nulls(self, "name", "type", "balance", "currency", "is_active")

class AccountRead(AccountBase):
    id: uuid.UUID
    user_id: uuid.UUID
    external_id: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class AccountConnectRequest(BaseModel):
    bank_name: str = Field(..., min_length=1, description="E.g. Chase, Mercury, SVB")
    account_type: AccountType

class AccountConnectResponse(BaseModel):
    account: AccountRead
    transaction_count: int
    message: str

class AccountSyncResponse(BaseModel):
    new_transactions: int
    balance_change: float
    new_balance: float
    message: str
