"""Pytest configuration and fixtures."""

import os

# Settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import random

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from runway.api.deps import get_bank_simulator, get_current_user
from runway.core.auth import User
from runway.core.database import Base, get_async_session
from runway.main import app
from runway.models import company, account, transaction, budget, forecast, report  # noqa: F401
from runway.utils.bank_simulation import BankSimulator


@pytest.fixture
async def engine():
    """In-memory database shared by every connection of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(engine):
    maker = async_sessionmaker(engine, expire_on_commit=False)
    async with maker() as session:
        yield session


async def _make_user(db_session, email):
    user = User(email=email, hashed_password="x", full_name="Test Founder")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def user(db_session):
    return await _make_user(db_session, "founder@example.com")


@pytest.fixture
async def other_user(db_session):
    return await _make_user(db_session, "someone-else@example.com")


@pytest.fixture
async def client(db_session, user):
    """HTTP client authenticated as ``user`` with a seeded bank simulator."""

    async def override_session():
        yield db_session

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[get_bank_simulator] = lambda: BankSimulator(rng=random.Random(42))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
