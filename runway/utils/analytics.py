# runway/utils/analytics.py
"""
Financial analytics for a single user: cash position, monthly burn, runway
and the current month's expense breakdown.

All sums are carried out with ``Decimal`` and converted to ``float`` only when
a result is serialized, so balances stored as fixed-point values never pick up
binary rounding drift.
"""
import calendar
import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)

# Runway reported when the company is not burning cash (burn <= 0).
# Kept for compatibility with existing clients; a null would be cleaner.
RUNWAY_SENTINEL_MONTHS = Decimal("999")

UNCATEGORIZED = "Uncategorized"

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class AnalyticsStorage(Protocol):
    """Read side the analytics need from persistence."""

    async def list_accounts(self, user_id: uuid.UUID) -> Sequence[Any]:
        ...

    async def list_transactions_in_range(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> Sequence[Any]:
        ...


# ────────────────────────────────────────────────────────────────────────────────
# RESULT TYPES
# ────────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class FinancialSummary:
    total_balance: Decimal
    monthly_expenses: Decimal
    monthly_revenue: Decimal
    monthly_burn: Decimal
    runway_months: Decimal

    @property
    def is_burning(self) -> bool:
        return self.monthly_burn > 0

    def to_dict(self) -> Dict[str, float]:
        return {
            "total_balance": float(self.total_balance),
            "monthly_burn": float(self.monthly_burn),
            "monthly_revenue": float(self.monthly_revenue),
            "runway_months": float(self.runway_months),
        }


@dataclass(frozen=True)
class ExpenseCategory:
    category: str
    amount: Decimal
    percentage: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "amount": float(self.amount),
            "percentage": float(self.percentage),
        }


# ────────────────────────────────────────────────────────────────────────────────
# HELPERS
# ────────────────────────────────────────────────────────────────────────────────
def parse_decimal(value: Any) -> Decimal:
    """Coerce a stored amount (str, Decimal, int, float or None) to Decimal."""
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their shortest repr instead of binary noise
    return Decimal(str(value))


def current_month_range(now: datetime) -> Tuple[datetime, datetime]:
    """First instant and last instant of the calendar month containing ``now``."""
    last_day = calendar.monthrange(now.year, now.month)[1]
    start = datetime(now.year, now.month, 1)
    end = datetime(now.year, now.month, last_day, 23, 59, 59, 999999)
    return start, end


def _field(obj: Any, name: str) -> Any:
    # ORM rows and plain dicts are both accepted
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _type_of(tx: Any) -> Optional[str]:
    tx_type = _field(tx, "type")
    # enum members are unwrapped to their value; plain strings pass through
    return getattr(tx_type, "value", tx_type)


def compute_runway(total_balance: Decimal, net_burn: Decimal) -> Decimal:
    if net_burn > 0:
        return total_balance / net_burn
    return RUNWAY_SENTINEL_MONTHS


# ────────────────────────────────────────────────────────────────────────────────
# AGGREGATIONS
# ────────────────────────────────────────────────────────────────────────────────
def summarize_finances(accounts: Iterable[Any], transactions: Iterable[Any]) -> FinancialSummary:
    """
    Total balance over every account (inactive ones included) and the month's
    burn figures over the given transactions. Transfers are ignored.
    """
    total_balance = sum((parse_decimal(_field(a, "balance")) for a in accounts), ZERO)

    monthly_expenses = ZERO
    monthly_revenue = ZERO
    for tx in transactions:
        tx_type = _type_of(tx)
        if tx_type == "expense":
            monthly_expenses += abs(parse_decimal(_field(tx, "amount")))
        elif tx_type == "income":
            monthly_revenue += parse_decimal(_field(tx, "amount"))

    monthly_burn = monthly_expenses - monthly_revenue

    return FinancialSummary(
        total_balance=total_balance,
        monthly_expenses=monthly_expenses,
        monthly_revenue=monthly_revenue,
        monthly_burn=monthly_burn,
        runway_months=compute_runway(total_balance, monthly_burn),
    )


def breakdown_expenses(transactions: Iterable[Any]) -> List[ExpenseCategory]:
    """Expense totals per category, in first-seen order."""
    totals: "OrderedDict[str, Decimal]" = OrderedDict()
    for tx in transactions:
        if _type_of(tx) != "expense":
            continue
        category = _field(tx, "category") or UNCATEGORIZED
        totals[category] = totals.get(category, ZERO) + abs(parse_decimal(_field(tx, "amount")))

    total_expenses = sum(totals.values(), ZERO)

    return [
        ExpenseCategory(
            category=category,
            amount=amount,
            percentage=(amount / total_expenses * HUNDRED) if total_expenses > 0 else ZERO,
        )
        for category, amount in totals.items()
    ]


# ────────────────────────────────────────────────────────────────────────────────
# MAIN ENTRY
# ────────────────────────────────────────────────────────────────────────────────
class FinancialAnalytics:
    """
    Entry point used by the HTTP layer, reports and forecasting.

    ``storage`` supplies the user's accounts and transactions; ``clock``
    decides which calendar month counts as "this month".
    """

    def __init__(self, storage: AnalyticsStorage, clock: Callable[[], datetime] = datetime.now) -> None:
        self._storage = storage
        self._clock = clock

    def month_range(self) -> Tuple[datetime, datetime]:
        return current_month_range(self._clock())

    async def _month_transactions(self, user_id: uuid.UUID) -> Sequence[Any]:
        start, end = self.month_range()
        return await self._storage.list_transactions_in_range(user_id, start, end)

    async def get_financial_summary(self, user_id: uuid.UUID) -> FinancialSummary:
        accounts = await self._storage.list_accounts(user_id)
        transactions = await self._month_transactions(user_id)
        summary = summarize_finances(accounts, transactions)
        logger.debug(
            f"Summary for {user_id}: balance={summary.total_balance} "
            f"burn={summary.monthly_burn} runway={summary.runway_months}"
        )
        return summary

    async def get_expense_breakdown(self, user_id: uuid.UUID) -> List[ExpenseCategory]:
        transactions = await self._month_transactions(user_id)
        return breakdown_expenses(transactions)
