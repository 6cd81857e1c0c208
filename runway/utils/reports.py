# runway/utils/reports.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from runway.utils.analytics import ExpenseCategory, FinancialSummary
from runway.utils.forecasting import ScenarioProjection


def report_file_name(report_type: str, report_format: str, now: datetime) -> str:
    return f"{report_type}_{now.strftime('%Y-%m-%d')}.{report_format}"


def _date_range(start: datetime, end: datetime) -> Dict[str, str]:
    return {"from": start.isoformat(), "to": end.isoformat()}


def build_report_data(
    report_type: str,
    now: datetime,
    month_start: datetime,
    month_end: datetime,
    summary: Optional[FinancialSummary] = None,
    breakdown: Optional[List[ExpenseCategory]] = None,
    projections: Optional[List[ScenarioProjection]] = None,
    transactions: Optional[List[Dict[str, Any]]] = None,
    budgets: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """JSON payload stored on the report row; only the parts the type needs are read."""
    data: Dict[str, Any] = {
        "date_range": _date_range(month_start, month_end),
        "generated_at": now.isoformat(),
    }

    if report_type == "financial_summary" and summary is not None:
        data["summary"] = summary.to_dict()
    elif report_type == "expense_breakdown" and breakdown is not None:
        data["breakdown"] = [item.to_dict() for item in breakdown]
        data["total"] = float(sum(item.amount for item in breakdown))
    elif report_type == "runway_analysis" and summary is not None:
        data["current_runway"] = float(summary.runway_months)
        data["scenarios"] = [
            {"name": p.scenario.name, "runway": float(p.runway_months)}
            for p in (projections or [])
        ]
    elif report_type == "transaction_history" and transactions is not None:
        data["transactions"] = transactions
        data["count"] = len(transactions)
    elif report_type == "budget_performance" and budgets is not None:
        data["budgets"] = budgets

    return data
