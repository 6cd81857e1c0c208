#!/usr/bin/env python3
"""
Standalone script that creates a demo founder account with a company profile
and two simulated bank connections.
Usage: python seed_demo.py
"""

import asyncio
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from fastapi_users.db import SQLAlchemyUserDatabase

from runway.core.config import settings
from runway.core.database import Base
from runway.core.auth import User, UserManager, UserCreate
from runway.crud.account import create_account_for_user
from runway.crud.company import create_company_for_user
from runway.crud.transaction import bulk_create_transactions_for_user
from runway.crud.storage import DatabaseStorage
from runway.models import company, account, transaction, budget, forecast, report  # noqa: F401
from runway.schemas.account import AccountCreate
from runway.schemas.company import CompanyCreate
from runway.utils.analytics import FinancialAnalytics
from runway.utils.bank_simulation import BankSimulator

DEMO_BANKS = [("Mercury", "checking"), ("SVB", "savings")]

async def seed_demo():
    print("Seeding demo data...")

    email = input("Demo user email: ") or "founder@example.com"
    password = input("Demo user password: ") or "runway123"

    engine = create_async_engine(settings.DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async_session_maker = async_sessionmaker(engine, expire_on_commit=False)

    async with async_session_maker() as session:
        try:
            user_manager = UserManager(SQLAlchemyUserDatabase(session, User))

            if await user_manager.user_db.get_by_email(email):
                print(f"User with email {email} already exists!")
                return

            user = await user_manager.create(
                UserCreate(email=email, password=password, full_name="Demo Founder", is_verified=True)
            )
            await create_company_for_user(
                user.id,
                CompanyCreate(name="Acme Robotics", industry="Hardware", team_size="6-20", stage="seed"),
                session,
            )

            simulator = BankSimulator()
            for bank_name, account_type in DEMO_BANKS:
                acct = await create_account_for_user(
                    user.id,
                    AccountCreate(
                        name=f"{bank_name} {account_type}",
                        type=account_type,
                        balance=simulator.opening_balance(account_type),
                        bank_name=bank_name,
                    ),
                    session,
                    **simulator.connection_ids(),
                )
                history = simulator.history(acct.id, days=settings.SIMULATED_HISTORY_DAYS)
                await bulk_create_transactions_for_user(user.id, history, session)
                print(f"✅ {acct.name}: {len(history)} transactions")

            summary = await FinancialAnalytics(DatabaseStorage(session)).get_financial_summary(user.id)
            print(f"📧 Email: {user.email}")
            print(f"💰 Total balance: {summary.total_balance}")
            print(f"🔥 Monthly burn: {summary.monthly_burn}")
            print(f"🛫 Runway: {summary.runway_months:.1f} months")

        except Exception as e:
            print(f"❌ Error seeding demo data: {e}")
        finally:
            await session.close()
            await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed_demo())
