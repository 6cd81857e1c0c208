# runway/schemas/budget.py
from typing import List, Literal, Optional
from decimal import Decimal
from pydantic import BaseModel, Field, model_validator
from datetime import datetime
import uuid

from runway.schemas.validators import reject_explicit_nulls

class BudgetBase(BaseModel):
    category: str = Field(..., min_length=1, description="Transaction category the limit applies to")
    monthly_limit: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    alert_threshold: int = Field(80, ge=1, le=100, description="Percent of the limit that triggers an alert")
    is_active: bool = True

class BudgetCreate(BudgetBase):
    pass

class BudgetUpdate(BaseModel):
    category: Optional[str] = Field(None, min_length=1)
    monthly_limit: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    alert_threshold: Optional[int] = Field(None, ge=1, le=100)
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def required_columns_not_null(self):
        return reject_explicit_nulls(self, "category", "monthly_limit", "alert_threshold", "is_active")

class BudgetRead(BudgetBase):
    id: uuid.UUID
    user_id: uuid.UUID
    current_spent: Decimal
    created_at: datetime

    class Config:
        from_attributes = True

class BudgetStatusRead(BaseModel):
    id: uuid.UUID
    category: str
    monthly_limit: float
    spent: float
    remaining: float
    percentage: float
    alert_threshold: int
    is_active: bool
    status: Literal["good", "warning", "over"]

class BudgetOverview(BaseModel):
    total_budgeted: float
    total_spent: float
    budgets: List[BudgetStatusRead]
    alerts: List[BudgetStatusRead]
