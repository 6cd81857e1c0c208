"""Tests for scenario projections."""

from decimal import Decimal

from runway.utils.analytics import RUNWAY_SENTINEL_MONTHS, summarize_finances
from runway.utils.forecasting import (
    DEFAULT_SCENARIOS,
    Scenario,
    project_balances,
    project_scenario,
    project_scenarios,
)


def _summary(balance="120000", expenses="20000", revenue="10000"):
    return summarize_finances(
        [{"balance": balance}],
        [
            {"type": "expense", "amount": f"-{expenses}"},
            {"type": "income", "amount": revenue},
        ],
    )


def test_neutral_scenario_matches_current_runway():
    summary = _summary()

    projection = project_scenario(summary, Scenario("flat"))

    assert projection.net_burn == summary.monthly_burn == Decimal("10000")
    assert projection.runway_months == summary.runway_months == Decimal("12")


def test_scenario_scales_revenue_and_gross_expenses():
    projection = project_scenario(_summary(), Scenario("growth", revenue_growth=50, burn_change=-10))

    assert projection.projected_revenue == Decimal("15000")
    assert projection.projected_expenses == Decimal("18000")
    assert projection.net_burn == Decimal("3000")
    assert projection.runway_months == Decimal("40")


def test_profitable_scenario_uses_sentinel():
    projection = project_scenario(_summary(), Scenario("boom", revenue_growth=200))

    assert projection.net_burn < 0
    assert projection.runway_months == RUNWAY_SENTINEL_MONTHS


def test_default_scenarios_are_ordered_by_outlook():
    projections = project_scenarios(_summary())

    assert [p.scenario.name for p in projections] == ["optimistic", "realistic", "pessimistic"]
    runways = [p.runway_months for p in projections]
    assert runways[0] > runways[1] > runways[2]
    assert len(DEFAULT_SCENARIOS) == 3


def test_balances_floor_at_zero():
    balances = project_balances(Decimal("25000"), Decimal("10000"), 4)

    assert balances == [Decimal("25000"), Decimal("15000"), Decimal("5000"), Decimal("0"), Decimal("0")]


def test_projection_length_follows_months():
    projection = project_scenario(_summary(), Scenario("flat"), months=6)
    data = projection.to_dict()

    assert len(data["projection"]) == 7
    assert data["projection"][0] == 120000.0
    assert data["name"] == "flat"
    assert data["runway_months"] == 12.0
