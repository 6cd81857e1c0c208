# runway/api/v1/routes/accounts.py
import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from runway.schemas.account import (
    AccountConnectRequest,
    AccountConnectResponse,
    AccountCreate,
    AccountRead,
    AccountSyncResponse,
    AccountUpdate,
)
from runway.crud.account import (
    create_account_for_user,
    delete_account,
    get_account_by_id,
    get_accounts_for_user,
    set_account_balance,
    update_account,
)
from runway.crud.transaction import bulk_create_transactions_for_user, get_transactions_for_account
from runway.schemas.transaction import TransactionRead
from runway.core.config import settings
from runway.core.database import get_async_session
from runway.core.auth import User
from runway.api.deps import get_bank_simulator, get_current_user
from runway.utils.analytics import parse_decimal
from runway.utils.bank_simulation import BankSimulator, balance_change

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"])

async def _get_owned_account(account_id: uuid.UUID, user: User, db: AsyncSession):
    account = await get_account_by_id(account_id, user.id, db)
    if not account:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Account not found")
    return account

@router.get("", response_model=List[AccountRead])
async def read_accounts(
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    return await get_accounts_for_user(user.id, db)

@router.post("", response_model=AccountRead, status_code=status.HTTP_201_CREATED)
async def create_account(
    account_in: AccountCreate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    return await create_account_for_user(user.id, account_in, db)

@router.post("/connect", response_model=AccountConnectResponse, status_code=status.HTTP_201_CREATED)
async def connect_account(
    connect_in: AccountConnectRequest,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
    simulator: BankSimulator = Depends(get_bank_simulator),
):
    """
    Simulate linking a bank account: creates the account with a realistic
    balance and back-fills its recent transaction history.
    """
    account_type = connect_in.account_type.value
    account_in = AccountCreate(
        name=f"{connect_in.bank_name} {account_type}",
        type=account_type,
        balance=simulator.opening_balance(account_type),
        bank_name=connect_in.bank_name,
    )
    account = await create_account_for_user(user.id, account_in, db, **simulator.connection_ids())

    history = simulator.history(account.id, days=settings.SIMULATED_HISTORY_DAYS)
    created = await bulk_create_transactions_for_user(user.id, history, db)
    logger.info(f"Connected {account.name} for {user.email} with {len(created)} transactions")

    return AccountConnectResponse(
        account=AccountRead.model_validate(account, from_attributes=True),
        transaction_count=len(created),
        message="Account connected successfully with transaction history",
    )

@router.get("/{account_id}", response_model=AccountRead)
async def read_account(
    account_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    return await _get_owned_account(account_id, user, db)

@router.get("/{account_id}/transactions", response_model=List[TransactionRead])
async def read_account_transactions(
    account_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    account = await _get_owned_account(account_id, user, db)
    return await get_transactions_for_account(account.id, db)

@router.patch("/{account_id}", response_model=AccountRead)
async def update_account_endpoint(
    account_id: uuid.UUID,
    account_in: AccountUpdate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    account = await _get_owned_account(account_id, user, db)
    return await update_account(account, account_in, db)

@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account_endpoint(
    account_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    account = await _get_owned_account(account_id, user, db)
    await delete_account(account, db)
    return None

@router.post("/{account_id}/sync", response_model=AccountSyncResponse)
async def sync_account(
    account_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
    simulator: BankSimulator = Depends(get_bank_simulator),
):
    """Pull the transactions posted since the last sync and move the balance with them."""
    account = await _get_owned_account(account_id, user, db)

    new_transactions = simulator.new_transactions(account.id)
    added = await bulk_create_transactions_for_user(user.id, new_transactions, db, commit=False)

    change = balance_change(added)
    new_balance = parse_decimal(account.balance) + change
    # Commits the new transactions together with the balance
    account = await set_account_balance(account, new_balance, db)

    return AccountSyncResponse(
        new_transactions=len(added),
        balance_change=float(change),
        new_balance=float(account.balance),
        message=f"Synced {len(added)} new transactions",
    )
