# runway/utils/bank_simulation.py
"""
Simulated bank connection. Stands in for a real aggregator (Plaid and the
like): it invents a believable balance and transaction history for a new
account and a handful of fresh transactions on every sync.
"""
from __future__ import annotations

import random
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from runway.schemas.transaction import TransactionCreate
from runway.utils.analytics import ZERO, parse_decimal

CENT = Decimal("0.01")

# (low, high) opening balance per account type
BALANCE_RANGES = {
    "checking": (1000, 16000),
    "savings": (5000, 55000),
    "credit": (0, 2000),
}
DEFAULT_BALANCE_RANGE = (2000, 27000)

RECURRING_DESCRIPTIONS = {"Office Rent", "Internet & Utilities", "Software Licenses"}


@dataclass(frozen=True)
class Template:
    description: str
    category: str
    min_amount: float
    max_amount: float


EXPENSE_TEMPLATES: List[Template] = [
    Template("AWS Services", "Engineering", 500, 3000),
    Template("Google Cloud Platform", "Engineering", 200, 1500),
    Template("GitHub Enterprise", "Engineering", 100, 500),
    Template("Figma Team Plan", "Engineering", 50, 200),
    Template("Office Rent", "Operations", 2000, 8000),
    Template("Internet & Utilities", "Operations", 200, 600),
    Template("Legal Services", "Legal", 500, 5000),
    Template("Accounting Services", "Operations", 300, 1500),
    Template("Marketing Tools", "Marketing", 100, 1000),
    Template("Social Media Ads", "Marketing", 500, 3000),
    Template("Conference Tickets", "Marketing", 300, 2000),
    Template("Team Lunch", "Operations", 50, 300),
    Template("Software Licenses", "Engineering", 100, 1000),
    Template("Hardware & Equipment", "Office & Equipment", 500, 3000),
    Template("Travel Expenses", "Travel", 200, 2000),
]

INCOME_TEMPLATES: List[Template] = [
    Template("Customer Payment", "Revenue", 1000, 10000),
    Template("Subscription Revenue", "Revenue", 500, 5000),
    Template("Consulting Services", "Revenue", 2000, 15000),
    Template("Grant Funding", "Revenue", 5000, 50000),
    Template("Investment Round", "Revenue", 25000, 500000),
]

# Fixed amounts seen between two syncs
SYNC_TEMPLATES = [
    ("AWS Services", "Engineering", "847.23", "expense"),
    ("Stripe Processing Fees", "Operations", "45.67", "expense"),
    ("Customer Payment - Acme Corp", "Revenue", "2500.00", "income"),
    ("Google Workspace", "Operations", "72.00", "expense"),
    ("Team Lunch - Pizza", "Operations", "89.43", "expense"),
]


def _money(value: float) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class BankSimulator:
    """Random source is injectable so tests can pin the output."""

    def __init__(self, rng: Optional[random.Random] = None, clock=datetime.now) -> None:
        self.rng = rng or random.Random()
        self.clock = clock

    def _external_id(self, prefix: str) -> str:
        return f"{prefix}_{int(self.clock().timestamp() * 1000)}_{self.rng.getrandbits(40):010x}"

    def opening_balance(self, account_type: str) -> Decimal:
        low, high = BALANCE_RANGES.get(account_type, DEFAULT_BALANCE_RANGE)
        return _money(self.rng.uniform(low, high))

    def connection_ids(self) -> dict:
        stamp = int(self.clock().timestamp() * 1000)
        return {
            "external_id": f"mock_{stamp}",
            "access_token": f"mock_token_{stamp}",
        }

    def history(self, account_id: uuid.UUID, days: int = 90) -> List[TransactionCreate]:
        """
        One candidate business transaction per day for the past ``days`` days.
        Weekends are mostly skipped; 60% expenses, 40% income.
        """
        now = self.clock()
        transactions: List[TransactionCreate] = []
        for days_ago in range(days, -1, -1):
            day = now - timedelta(days=days_ago)
            if day.weekday() >= 5 and self.rng.random() < 0.7:
                continue

            is_expense = self.rng.random() < 0.6
            template = self.rng.choice(EXPENSE_TEMPLATES if is_expense else INCOME_TEMPLATES)
            amount = _money(self.rng.uniform(template.min_amount, template.max_amount))

            transactions.append(TransactionCreate(
                account_id=account_id,
                amount=-amount if is_expense else amount,
                description=template.description,
                category=template.category,
                date=day,
                type="expense" if is_expense else "income",
                external_id=self._external_id("mock_tx"),
                is_recurring=template.description in RECURRING_DESCRIPTIONS,
            ))
        return transactions

    def new_transactions(self, account_id: uuid.UUID) -> List[TransactionCreate]:
        """1-3 transactions from the last 24 hours."""
        now = self.clock()
        transactions: List[TransactionCreate] = []
        for _ in range(self.rng.randint(1, 3)):
            description, category, amount, tx_type = self.rng.choice(SYNC_TEMPLATES)
            hours_ago = self.rng.randint(1, 24)
            value = Decimal(amount)
            transactions.append(TransactionCreate(
                account_id=account_id,
                amount=-value if tx_type == "expense" else value,
                description=description,
                category=category,
                date=now - timedelta(hours=hours_ago),
                type=tx_type,
                external_id=self._external_id("sync_tx"),
            ))
        return transactions


def balance_change(transactions: Iterable) -> Decimal:
    """Income adds its amount; every other type subtracts abs(amount)."""
    change = ZERO
    for tx in transactions:
        amount = parse_decimal(tx.amount)
        tx_type = getattr(tx.type, "value", tx.type)
        change += amount if tx_type == "income" else -abs(amount)
    return change
