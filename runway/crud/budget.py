# runway/crud/budget.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from runway.models.budget import Budget
from typing import Dict, List, Optional
from decimal import Decimal
import uuid
from runway.schemas.budget import BudgetCreate, BudgetUpdate

async def get_budgets_for_user(user_id: uuid.UUID, db: AsyncSession) -> List[Budget]:
    result = await db.execute(
        select(Budget).where(Budget.user_id == user_id).order_by(Budget.created_at)
    )
    return result.scalars().all()

async def get_budget_by_id(budget_id: uuid.UUID, user_id: uuid.UUID, db: AsyncSession) -> Optional[Budget]:
    result = await db.execute(
        select(Budget).where(Budget.id == budget_id, Budget.user_id == user_id)
    )
    return result.scalar_one_or_none()

async def create_budget_for_user(user_id: uuid.UUID, budget_in: BudgetCreate, db: AsyncSession) -> Budget:
    new_budget = Budget(**budget_in.model_dump(), user_id=user_id)
    db.add(new_budget)
    await db.commit()
    await db.refresh(new_budget)
    return new_budget

async def update_budget(budget: Budget, budget_in: BudgetUpdate, db: AsyncSession) -> Budget:
    for field, value in budget_in.model_dump(exclude_unset=True).items():
        setattr(budget, field, value)
    db.add(budget)
    await db.commit()
    await db.refresh(budget)
    return budget

async def store_current_spent(budgets: List[Budget], spent_by_id: Dict[uuid.UUID, Decimal], db: AsyncSession) -> None:
    """Persist the freshly computed spend for each budget in one commit."""
    changed = False
    for budget in budgets:
        spent = spent_by_id.get(budget.id, Decimal("0"))
        if budget.current_spent != spent:
            budget.current_spent = spent
            changed = True
    if changed:
        db.add_all(budgets)
        await db.commit()

async def delete_budget(budget: Budget, db: AsyncSession) -> None:
    await db.delete(budget)
    await db.commit()
