# runway/schemas/forecast.py
from typing import Any, Dict, List, Optional
from decimal import Decimal
from pydantic import BaseModel, Field
from datetime import datetime
import uuid

class ScenarioInput(BaseModel):
    name: str = Field(..., min_length=1, description="E.g. optimistic, realistic, pessimistic")
    revenue_growth: float = Field(0.0, description="Percent change applied to monthly revenue")
    burn_change: float = Field(0.0, description="Percent change applied to monthly expenses")

class ScenarioResult(BaseModel):
    name: str
    revenue_growth: float
    burn_change: float
    projected_revenue: float
    projected_expenses: float
    net_burn: float
    runway_months: float
    projection: List[float]

class ForecastGenerateRequest(BaseModel):
    scenarios: Optional[List[ScenarioInput]] = None
    months: int = Field(12, ge=1, le=60)

class ForecastRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    scenario_type: str
    projected_revenue: Optional[Decimal] = None
    projected_expenses: Optional[Decimal] = None
    runway_months: Optional[Decimal] = None
    assumptions: Optional[Dict[str, Any]] = None
    projection_data: Optional[Dict[str, Any]] = None
    created_at: datetime

    class Config:
        from_attributes = True
