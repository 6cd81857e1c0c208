# runway/schemas/report.py
from typing import Any, Dict
from enum import Enum
from pydantic import BaseModel
from datetime import datetime
import uuid

class ReportType(str, Enum):
    financial_summary = "financial_summary"
    runway_analysis = "runway_analysis"
    expense_breakdown = "expense_breakdown"
    transaction_history = "transaction_history"
    budget_performance = "budget_performance"

class ReportFormat(str, Enum):
    pdf = "pdf"
    csv = "csv"
    excel = "excel"

class ReportCreate(BaseModel):
    type: ReportType
    format: ReportFormat = ReportFormat.pdf

class ReportRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    type: str
    format: str
    data: Dict[str, Any]
    file_name: str
    generated_at: datetime

    class Config:
        from_attributes = True
