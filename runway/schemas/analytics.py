# runway/schemas/analytics.py
from pydantic import BaseModel, Field

class FinancialSummaryResponse(BaseModel):
    total_balance: float
    monthly_burn: float = Field(..., description="Expenses minus revenue; negative means net positive cash flow")
    monthly_revenue: float
    runway_months: float = Field(..., description="999 when the company is not burning cash")

class ExpenseCategoryResponse(BaseModel):
    category: str
    amount: float
    percentage: float
