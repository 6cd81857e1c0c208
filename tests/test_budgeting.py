"""Tests for budget status and the budget overview."""

import uuid
from decimal import Decimal
from types import SimpleNamespace

import pytest

from runway.utils.analytics import breakdown_expenses
from runway.utils.budgeting import budget_percentage, budget_status, evaluate_budgets


def _budget(category, limit, threshold=80, is_active=True):
    return SimpleNamespace(
        id=uuid.uuid4(),
        category=category,
        monthly_limit=Decimal(limit),
        alert_threshold=threshold,
        is_active=is_active,
    )


@pytest.mark.parametrize(
    "spent,limit,expected",
    [
        ("0", "1000", "good"),
        ("799.99", "1000", "good"),
        ("800", "1000", "warning"),
        ("999.99", "1000", "warning"),
        ("1000", "1000", "over"),
        ("1500", "1000", "over"),
    ],
)
def test_budget_status_thresholds(spent, limit, expected):
    _, status = budget_status(Decimal(spent), Decimal(limit), 80)
    assert status == expected


def test_zero_limit_never_divides():
    assert budget_percentage(Decimal("50"), Decimal("0")) == 0


def test_overview_matches_budgets_to_month_spend():
    breakdown = breakdown_expenses([
        {"type": "expense", "amount": "-900.00", "category": "Marketing"},
        {"type": "expense", "amount": "-100.00", "category": "Engineering"},
        {"type": "expense", "amount": "-300.00", "category": "Travel"},
    ])
    marketing = _budget("Marketing", "1000")
    engineering = _budget("Engineering", "1000")
    travel = _budget("Travel", "200", is_active=False)
    legal = _budget("Legal", "500")

    overview = evaluate_budgets([marketing, engineering, travel, legal], breakdown)

    rows = {row["category"]: row for row in overview["budgets"]}
    assert rows["Marketing"]["status"] == "warning"
    assert rows["Marketing"]["remaining"] == 100.0
    assert rows["Engineering"]["status"] == "good"
    assert rows["Travel"]["status"] == "over"
    assert rows["Legal"]["spent"] == 0.0

    # inactive budgets never alert
    assert [row["category"] for row in overview["alerts"]] == ["Marketing"]
    assert overview["total_budgeted"] == 2700.0
    assert overview["total_spent"] == 1300.0
    assert overview["spent_by_id"][marketing.id] == Decimal("900.00")
