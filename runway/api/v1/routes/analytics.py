# runway/api/v1/routes/analytics.py
from fastapi import APIRouter, Depends
from typing import List

from runway.schemas.analytics import ExpenseCategoryResponse, FinancialSummaryResponse
from runway.core.auth import User
from runway.api.deps import get_analytics, get_current_user
from runway.utils.analytics import FinancialAnalytics

router = APIRouter(tags=["analytics"])

@router.get("/financial-summary", response_model=FinancialSummaryResponse)
async def read_financial_summary(
    analytics: FinancialAnalytics = Depends(get_analytics),
    user: User = Depends(get_current_user),
):
    """
    Cash position for the current calendar month:

    - **total_balance**: sum of every account balance
    - **monthly_burn**: this month's expenses minus revenue
    - **monthly_revenue**: this month's income
    - **runway_months**: balance / burn, or 999 when not burning cash
    """
    summary = await analytics.get_financial_summary(user.id)
    return summary.to_dict()

@router.get("/expense-breakdown", response_model=List[ExpenseCategoryResponse])
async def read_expense_breakdown(
    analytics: FinancialAnalytics = Depends(get_analytics),
    user: User = Depends(get_current_user),
):
    """This month's expenses per category with each category's share of the total."""
    breakdown = await analytics.get_expense_breakdown(user.id)
    return [item.to_dict() for item in breakdown]
