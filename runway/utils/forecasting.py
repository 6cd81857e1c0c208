# runway/utils/forecasting.py
"""Runway under what-if revenue growth / burn change scenarios."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from runway.utils.analytics import FinancialSummary, ZERO, HUNDRED, compute_runway

DEFAULT_PROJECTION_MONTHS = 12


@dataclass(frozen=True)
class Scenario:
    name: str
    revenue_growth: float = 0.0  # percent
    burn_change: float = 0.0     # percent


DEFAULT_SCENARIOS: List[Scenario] = [
    Scenario(name="optimistic", revenue_growth=25, burn_change=-15),
    Scenario(name="realistic", revenue_growth=10, burn_change=-5),
    Scenario(name="pessimistic", revenue_growth=-5, burn_change=10),
]


@dataclass(frozen=True)
class ScenarioProjection:
    scenario: Scenario
    projected_revenue: Decimal
    projected_expenses: Decimal
    net_burn: Decimal
    runway_months: Decimal
    balances: List[Decimal]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.scenario.name,
            "revenue_growth": self.scenario.revenue_growth,
            "burn_change": self.scenario.burn_change,
            "projected_revenue": float(self.projected_revenue),
            "projected_expenses": float(self.projected_expenses),
            "net_burn": float(self.net_burn),
            "runway_months": float(self.runway_months),
            "projection": [float(b) for b in self.balances],
        }


def _apply_percent(value: Decimal, percent: float) -> Decimal:
    return value * (1 + Decimal(str(percent)) / HUNDRED)


def project_balances(total_balance: Decimal, net_burn: Decimal, months: int) -> List[Decimal]:
    """Month 0 is today's balance; the balance floors at zero."""
    balances = [total_balance]
    balance = total_balance
    for _ in range(months):
        balance = max(ZERO, balance - net_burn)
        balances.append(balance)
    return balances


def project_scenario(
    summary: FinancialSummary,
    scenario: Scenario,
    months: int = DEFAULT_PROJECTION_MONTHS,
) -> ScenarioProjection:
    """
    Scale this month's revenue and gross expenses by the scenario's
    percentages and recompute runway from the resulting net burn.
    """
    projected_revenue = _apply_percent(summary.monthly_revenue, scenario.revenue_growth)
    projected_expenses = _apply_percent(summary.monthly_expenses, scenario.burn_change)
    net_burn = projected_expenses - projected_revenue

    return ScenarioProjection(
        scenario=scenario,
        projected_revenue=projected_revenue,
        projected_expenses=projected_expenses,
        net_burn=net_burn,
        runway_months=compute_runway(summary.total_balance, net_burn),
        balances=project_balances(summary.total_balance, net_burn, months),
    )


def project_scenarios(
    summary: FinancialSummary,
    scenarios: Optional[Sequence[Scenario]] = None,
    months: int = DEFAULT_PROJECTION_MONTHS,
) -> List[ScenarioProjection]:
    return [project_scenario(summary, s, months) for s in (scenarios or DEFAULT_SCENARIOS)]
