# runway/crud/transaction.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import desc
from runway.core.db_utils import with_db_retry
from runway.models.transaction import Transaction
from typing import Iterable, List, Optional
from datetime import datetime
import uuid
from runway.schemas.transaction import TransactionCreate, TransactionUpdate

async def get_transactions_for_user(user_id: uuid.UUID, db: AsyncSession, limit: Optional[int] = 50) -> List[Transaction]:
    """Newest first; ``limit=None`` returns the full history"""
    query = (
        select(Transaction)
        .where(Transaction.user_id == user_id)
        .order_by(desc(Transaction.date))
    )
    if limit is not None:
        query = query.limit(limit)
    result = await db.execute(query)
    return result.scalars().all()

async def get_transactions_for_account(account_id: uuid.UUID, db: AsyncSession) -> List[Transaction]:
    result = await db.execute(
        select(Transaction)
        .where(Transaction.account_id == account_id)
        .order_by(desc(Transaction.date))
    )
    return result.scalars().all()

@with_db_retry()
async def get_transactions_in_range(
    user_id: uuid.UUID,
    start: datetime,
    end: datetime,
    db: AsyncSession,
) -> List[Transaction]:
    """All of the user's transactions dated within [start, end], both ends inclusive."""
    result = await db.execute(
        select(Transaction).where(
            Transaction.user_id == user_id,
            Transaction.date >= start,
            Transaction.date <= end,
        )
    )
    return result.scalars().all()

async def get_transaction_by_id(transaction_id: uuid.UUID, user_id: uuid.UUID, db: AsyncSession) -> Optional[Transaction]:
    result = await db.execute(
        select(Transaction).where(Transaction.id == transaction_id, Transaction.user_id == user_id)
    )
    return result.scalar_one_or_none()

async def get_transactions_by_ids(ids: Iterable[uuid.UUID], user_id: uuid.UUID, db: AsyncSession) -> List[Transaction]:
    result = await db.execute(
        select(Transaction).where(Transaction.id.in_(list(ids)), Transaction.user_id == user_id)
    )
    return result.scalars().all()

async def create_transaction_for_user(user_id: uuid.UUID, tx_in: TransactionCreate, db: AsyncSession) -> Transaction:
    new_tx = Transaction(**tx_in.model_dump(), user_id=user_id)
    db.add(new_tx)
    await db.commit()
    await db.refresh(new_tx)
    return new_tx

async def update_transaction(tx: Transaction, tx_in: TransactionUpdate, db: AsyncSession) -> Transaction:
    for field, value in tx_in.model_dump(exclude_unset=True).items():
        setattr(tx, field, value)
    db.add(tx)
    await db.commit()
    await db.refresh(tx)
    return tx

async def bulk_update_transactions(
    txs: List[Transaction],
    tx_in: TransactionUpdate,
    db: AsyncSession,
) -> List[Transaction]:
    """Applies the same partial update to every transaction in one commit."""
    changes = tx_in.model_dump(exclude_unset=True)
    for tx in txs:
        for field, value in changes.items():
            setattr(tx, field, value)
    db.add_all(txs)
    await db.commit()
    for tx in txs:
        await db.refresh(tx)
    return txs

async def delete_transaction(tx: Transaction, db: AsyncSession) -> None:
    await db.delete(tx)
    await db.commit()


async def bulk_create_transactions_for_user(
    user_id: uuid.UUID,
    tx_inputs: Iterable[TransactionCreate],
    db: AsyncSession,
    commit: bool = True,
) -> List[Transaction]:
    """Efficiently inserts many transactions for a user."""
    new_instances: List[Transaction] = []
    for tx_in in tx_inputs:
        new_instances.append(Transaction(**tx_in.model_dump(), user_id=user_id))
    if not new_instances:
        return []
    db.add_all(new_instances)
    if commit:
        await db.commit()
        # refresh individually to return with IDs
        for inst in new_instances:
            await db.refresh(inst)
    else:
        await db.flush()
    return new_instances
