# runway/api/v1/routes/budgets.py
import uuid
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from runway.schemas.budget import BudgetCreate, BudgetOverview, BudgetRead, BudgetUpdate
from runway.crud.budget import (
    create_budget_for_user,
    delete_budget,
    get_budget_by_id,
    get_budgets_for_user,
    store_current_spent,
    update_budget,
)
from runway.core.database import get_async_session
from runway.core.auth import User
from runway.api.deps import get_analytics, get_current_user
from runway.utils.analytics import FinancialAnalytics
from runway.utils.budgeting import evaluate_budgets

router = APIRouter(prefix="/budgets", tags=["budgets"])

@router.get("", response_model=List[BudgetRead])
async def read_budgets(
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    return await get_budgets_for_user(user.id, db)

@router.post("", response_model=BudgetRead, status_code=status.HTTP_201_CREATED)
async def create_budget(
    budget_in: BudgetCreate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    return await create_budget_for_user(user.id, budget_in, db)

@router.get("/overview", response_model=BudgetOverview)
async def read_budget_overview(
    db: AsyncSession = Depends(get_async_session),
    analytics: FinancialAnalytics = Depends(get_analytics),
    user: User = Depends(get_current_user),
):
    """
    Budget vs actual for the current month. Spend per budget comes from the
    month's expense breakdown and is written back to ``current_spent``.
    """
    budgets = await get_budgets_for_user(user.id, db)
    breakdown = await analytics.get_expense_breakdown(user.id)
    overview = evaluate_budgets(budgets, breakdown)
    await store_current_spent(budgets, overview.pop("spent_by_id"), db)
    return overview

@router.get("/{budget_id}", response_model=BudgetRead)
async def read_budget(
    budget_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    budget = await get_budget_by_id(budget_id, user.id, db)
    if not budget:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Budget not found")
    return budget

@router.patch("/{budget_id}", response_model=BudgetRead)
async def update_budget_endpoint(
    budget_id: uuid.UUID,
    budget_in: BudgetUpdate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    budget = await get_budget_by_id(budget_id, user.id, db)
    if not budget:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Budget not found")
    return await update_budget(budget, budget_in, db)

@router.delete("/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_budget_endpoint(
    budget_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    budget = await get_budget_by_id(budget_id, user.id, db)
    if not budget:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Budget not found")
    await delete_budget(budget, db)
    return None
