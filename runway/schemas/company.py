# runway/schemas/company.py
from typing import Optional
from pydantic import BaseModel, Field, model_validator
from datetime import datetime
import uuid

from runway.schemas.validators import reject_explicit_nulls

class CompanyBase(BaseModel):
    name: str = Field(..., min_length=1, description="Company name")
    industry: Optional[str] = None
    team_size: Optional[str] = Field(None, description="E.g. 1-5, 6-20, 21-50")
    stage: Optional[str] = Field(None, description="E.g. pre-seed, seed, series-a")

class CompanyCreate(CompanyBase):
    pass

class CompanyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    industry: Optional[str] = None
    team_size: Optional[str] = None
    stage: Optional[str] = None

    @model_validator(mode="after")
    def name_not_null(self):
        return reject_explicit_nulls(self, "name")

class CompanyRead(CompanyBase):
    id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime

    class Config:
        from_attributes = True
