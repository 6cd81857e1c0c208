"""Tests for the simulated bank connection."""

import random
import uuid
from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

from runway.utils.bank_simulation import BALANCE_RANGES, BankSimulator, balance_change

NOW = datetime(2024, 3, 15, 12, 0, 0)


def _simulator(seed=7):
    return BankSimulator(rng=random.Random(seed), clock=lambda: NOW)


def test_opening_balance_within_type_range():
    simulator = _simulator()
    for account_type, (low, high) in BALANCE_RANGES.items():
        balance = simulator.opening_balance(account_type)
        assert Decimal(low) <= balance <= Decimal(high)
        assert balance == balance.quantize(Decimal("0.01"))


def test_history_signs_and_dates():
    account_id = uuid.uuid4()
    history = _simulator().history(account_id, days=30)

    assert history
    assert len(history) <= 31
    for tx in history:
        assert tx.account_id == account_id
        assert NOW - timedelta(days=30) <= tx.date <= NOW
        if tx.type == "expense":
            assert tx.amount < 0
        else:
            assert tx.type == "income"
            assert tx.amount > 0


def test_history_is_reproducible_with_seed():
    account_id = uuid.uuid4()
    first = [(tx.description, tx.amount) for tx in _simulator(1).history(account_id, days=20)]
    second = [(tx.description, tx.amount) for tx in _simulator(1).history(account_id, days=20)]
    assert first == second


def test_new_transactions_from_last_day():
    new = _simulator().new_transactions(uuid.uuid4())

    assert 1 <= len(new) <= 3
    for tx in new:
        assert NOW - timedelta(hours=24) <= tx.date < NOW
        assert tx.external_id.startswith("sync_tx_")


def test_connection_ids():
    ids = _simulator().connection_ids()
    assert ids["external_id"].startswith("mock_")
    assert ids["access_token"].startswith("mock_token_")


def test_balance_change():
    transactions = [
        SimpleNamespace(type="income", amount=Decimal("2500.00")),
        SimpleNamespace(type="expense", amount=Decimal("-847.23")),
        SimpleNamespace(type="expense", amount=Decimal("45.67")),
    ]
    assert balance_change(transactions) == Decimal("1607.10")
