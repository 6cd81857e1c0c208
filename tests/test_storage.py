"""Tests for the database-backed analytics storage."""

from datetime import datetime
from decimal import Decimal

from runway.crud.account import create_account_for_user, get_accounts_for_user
from runway.crud.storage import DatabaseStorage
from runway.crud.transaction import bulk_create_transactions_for_user, get_transactions_for_user
from runway.schemas.account import AccountCreate
from runway.schemas.transaction import TransactionCreate
from runway.utils.analytics import FinancialAnalytics

MARCH_START = datetime(2024, 3, 1)
MARCH_END = datetime(2024, 3, 31, 23, 59, 59, 999999)


def _tx(account_id, amount, date, tx_type="expense", category="Engineering"):
    return TransactionCreate(
        account_id=account_id,
        amount=Decimal(amount),
        description="test",
        category=category,
        date=date,
        type=tx_type,
    )


async def _account(db_session, user, balance="1000.00"):
    return await create_account_for_user(
        user.id,
        AccountCreate(name="Checking", type="checking", balance=Decimal(balance)),
        db_session,
    )


async def test_range_is_inclusive_and_scoped_to_user(db_session, user, other_user):
    mine = await _account(db_session, user)
    theirs = await _account(db_session, other_user)
    await bulk_create_transactions_for_user(user.id, [
        _tx(mine.id, "-1.00", MARCH_START),
        _tx(mine.id, "-2.00", MARCH_END),
        _tx(mine.id, "-4.00", datetime(2024, 2, 29, 23, 59, 59)),
        _tx(mine.id, "-8.00", datetime(2024, 4, 1)),
    ], db_session)
    await bulk_create_transactions_for_user(other_user.id, [
        _tx(theirs.id, "-16.00", datetime(2024, 3, 10)),
    ], db_session)

    storage = DatabaseStorage(db_session)
    in_range = await storage.list_transactions_in_range(user.id, MARCH_START, MARCH_END)

    assert sorted(tx.amount for tx in in_range) == [Decimal("-2.00"), Decimal("-1.00")]
    assert len(await storage.list_accounts(user.id)) == 1


async def test_summary_over_database_rows(db_session, user):
    checking = await _account(db_session, user, "45000.00")
    await _account(db_session, user, "125000.00")
    await bulk_create_transactions_for_user(user.id, [
        _tx(checking.id, "-6000.00", datetime(2024, 3, 5)),
        _tx(checking.id, "1000.00", datetime(2024, 3, 6), tx_type="income", category="Revenue"),
        _tx(checking.id, "-99999.00", datetime(2024, 2, 6)),
    ], db_session)

    analytics = FinancialAnalytics(DatabaseStorage(db_session), clock=lambda: datetime(2024, 3, 20))
    summary = await analytics.get_financial_summary(user.id)

    assert summary.total_balance == Decimal("170000.00")
    assert summary.monthly_burn == Decimal("5000.00")
    assert summary.runway_months == Decimal("34")


async def test_transaction_listing_newest_first_with_limit(db_session, user):
    account = await _account(db_session, user)
    await bulk_create_transactions_for_user(user.id, [
        _tx(account.id, "-1.00", datetime(2024, 3, day)) for day in range(1, 6)
    ], db_session)

    latest = await get_transactions_for_user(user.id, db_session, limit=2)
    everything = await get_transactions_for_user(user.id, db_session, limit=None)

    assert [tx.date.day for tx in latest] == [5, 4]
    assert len(everything) == 5
    assert len(await get_accounts_for_user(user.id, db_session)) == 1
