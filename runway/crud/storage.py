# runway/crud/storage.py
from datetime import datetime
from typing import List
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from runway.crud.account import get_accounts_for_user
from runway.crud.transaction import get_transactions_in_range
from runway.models.account import Account
from runway.models.transaction import Transaction


class DatabaseStorage:
    """Analytics read side bound to one request's session."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_accounts(self, user_id: uuid.UUID) -> List[Account]:
        return await get_accounts_for_user(user_id, self.db)

    async def list_transactions_in_range(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> List[Transaction]:
        return await get_transactions_in_range(user_id, start, end, self.db)
