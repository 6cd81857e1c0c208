# runway/api/v1/routes/transactions.py
import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from runway.schemas.transaction import (
    TransactionBulkUpdate,
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from runway.crud.transaction import (
    bulk_update_transactions,
    create_transaction_for_user,
    delete_transaction,
    get_transaction_by_id,
    get_transactions_by_ids,
    get_transactions_for_user,
    update_transaction,
)
from runway.crud.account import get_account_by_id
from runway.core.config import settings
from runway.core.database import get_async_session
from runway.core.auth import User
from runway.api.deps import get_current_user

router = APIRouter(prefix="/transactions", tags=["transactions"])

@router.get("", response_model=List[TransactionRead])
async def read_transactions(
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Newest N transactions"),
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    return await get_transactions_for_user(user.id, db, limit=limit or settings.DEFAULT_TRANSACTION_LIMIT)

@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    tx_in: TransactionCreate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    # The account has to belong to the same user
    if not await get_account_by_id(tx_in.account_id, user.id, db):
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Account not found for this user")
    return await create_transaction_for_user(user.id, tx_in, db)

@router.put("/bulk", response_model=List[TransactionRead])
async def bulk_update_transactions_endpoint(
    bulk_in: TransactionBulkUpdate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    """Apply the same change (typically a category) to several transactions."""
    txs = await get_transactions_by_ids(bulk_in.ids, user.id, db)
    found = {tx.id for tx in txs}
    missing = [str(tx_id) for tx_id in bulk_in.ids if tx_id not in found]
    if missing:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=f"Transactions not found: {', '.join(missing)}")
    return await bulk_update_transactions(txs, bulk_in.updates, db)

@router.get("/{transaction_id}", response_model=TransactionRead)
async def read_transaction(
    transaction_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    tx = await get_transaction_by_id(transaction_id, user.id, db)
    if not tx:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return tx

@router.patch("/{transaction_id}", response_model=TransactionRead)
async def update_transaction_endpoint(
    transaction_id: uuid.UUID,
    tx_in: TransactionUpdate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    tx = await get_transaction_by_id(transaction_id, user.id, db)
    if not tx:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return await update_transaction(tx, tx_in, db)

@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction_endpoint(
    transaction_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    tx = await get_transaction_by_id(transaction_id, user.id, db)
    if not tx:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    await delete_transaction(tx, db)
    return None
