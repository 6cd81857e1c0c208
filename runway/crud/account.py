# runway/crud/account.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from runway.core.db_utils import with_db_retry
from runway.models.account import Account
from typing import List, Optional
from decimal import Decimal
import uuid
from runway.schemas.account import AccountCreate, AccountUpdate

@with_db_retry()
async def get_accounts_for_user(user_id: uuid.UUID, db: AsyncSession) -> List[Account]:
    result = await db.execute(
        select(Account).where(Account.user_id == user_id).order_by(Account.created_at)
    )
    return result.scalars().all()

async def get_account_by_id(account_id: uuid.UUID, user_id: uuid.UUID, db: AsyncSession) -> Optional[Account]:
    result = await db.execute(
        select(Account).where(Account.id == account_id, Account.user_id == user_id)
    )
    return result.scalar_one_or_none()

async def create_account_for_user(user_id: uuid.UUID, account_in: AccountCreate, db: AsyncSession, **extra) -> Account:
    """Insert an account; ``extra`` carries connection fields such as external_id."""
    new_account = Account(**account_in.model_dump(), **extra, user_id=user_id)
    db.add(new_account)
    await db.commit()
    await db.refresh(new_account)
    return new_account

async def update_account(account: Account, account_in: AccountUpdate, db: AsyncSession) -> Account:
    for field, value in account_in.model_dump(exclude_unset=True).items():
        setattr(account, field, value)
    db.add(account)
    await db.commit()
    await db.refresh(account)
    return account

async def set_account_balance(account: Account, balance: Decimal, db: AsyncSession) -> Account:
    account.balance = balance
    db.add(account)
    await db.commit()
    await db.refresh(account)
    return account

async def delete_account(account: Account, db: AsyncSession) -> None:
    await db.delete(account)
    await db.commit()
