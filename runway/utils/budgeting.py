# runway/utils/budgeting.py
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Tuple

from runway.models.budget import Budget
from runway.utils.analytics import ExpenseCategory, ZERO, HUNDRED, parse_decimal

STATUS_GOOD = "good"
STATUS_WARNING = "warning"
STATUS_OVER = "over"


# ────────────────────────────────────────────────────────────────────────────────
# STATUS
# ────────────────────────────────────────────────────────────────────────────────
def budget_percentage(spent: Decimal, limit: Decimal) -> Decimal:
    if limit <= 0:
        return ZERO
    return spent / limit * HUNDRED


def budget_status(spent: Decimal, limit: Decimal, alert_threshold: int) -> Tuple[Decimal, str]:
    """Percentage of the limit used and good / warning / over."""
    percentage = budget_percentage(spent, limit)
    if percentage >= HUNDRED:
        return percentage, STATUS_OVER
    if percentage >= alert_threshold:
        return percentage, STATUS_WARNING
    return percentage, STATUS_GOOD


# ────────────────────────────────────────────────────────────────────────────────
# OVERVIEW
# ────────────────────────────────────────────────────────────────────────────────
def spent_by_category(breakdown: Iterable[ExpenseCategory]) -> Dict[str, Decimal]:
    return {item.category: item.amount for item in breakdown}


def evaluate_budgets(budgets: List[Budget], breakdown: Iterable[ExpenseCategory]) -> Dict[str, Any]:
    """
    Match each budget to this month's spend in its category. Inactive budgets
    are reported but never raise alerts.
    """
    spending = spent_by_category(breakdown)

    rows: List[Dict[str, Any]] = []
    alerts: List[Dict[str, Any]] = []
    spent_by_id: Dict[Any, Decimal] = {}
    total_budgeted = ZERO
    total_spent = ZERO

    for budget in budgets:
        limit = parse_decimal(budget.monthly_limit)
        spent = spending.get(budget.category, ZERO)
        percentage, status = budget_status(spent, limit, budget.alert_threshold)

        spent_by_id[budget.id] = spent
        total_budgeted += limit
        total_spent += spent

        row = {
            "id": budget.id,
            "category": budget.category,
            "monthly_limit": float(limit),
            "spent": float(spent),
            "remaining": float(limit - spent),
            "percentage": round(float(percentage), 2),
            "alert_threshold": budget.alert_threshold,
            "is_active": bool(budget.is_active),
            "status": status,
        }
        rows.append(row)
        if budget.is_active and status != STATUS_GOOD:
            alerts.append(row)

    return {
        "total_budgeted": float(total_budgeted),
        "total_spent": float(total_spent),
        "budgets": rows,
        "alerts": alerts,
        "spent_by_id": spent_by_id,
    }
