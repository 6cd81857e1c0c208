# runway/api/v1/routes/reports.py
import logging
from datetime import datetime
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from runway.schemas.report import ReportCreate, ReportRead, ReportType
from runway.schemas.transaction import TransactionRead
from runway.crud.budget import get_budgets_for_user
from runway.crud.report import create_report_for_user, get_reports_for_user
from runway.crud.transaction import get_transactions_for_user
from runway.core.database import get_async_session
from runway.core.auth import User
from runway.api.deps import get_analytics, get_current_user
from runway.utils.analytics import FinancialAnalytics
from runway.utils.budgeting import evaluate_budgets
from runway.utils.forecasting import project_scenarios
from runway.utils.reports import build_report_data, report_file_name

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])

@router.get("", response_model=List[ReportRead])
async def read_reports(
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    return await get_reports_for_user(user.id, db)

@router.post("", response_model=ReportRead, status_code=status.HTTP_201_CREATED)
async def generate_report(
    report_in: ReportCreate,
    db: AsyncSession = Depends(get_async_session),
    analytics: FinancialAnalytics = Depends(get_analytics),
    user: User = Depends(get_current_user),
):
    """
    Snapshot the current analytics into a report record. Only the JSON data
    and file name are stored; rendering to the chosen format happens client-side.
    """
    now = datetime.now()
    month_start, month_end = analytics.month_range()
    report_type = report_in.type

    summary = breakdown = projections = transactions = budgets = None
    if report_type in (ReportType.financial_summary, ReportType.runway_analysis):
        summary = await analytics.get_financial_summary(user.id)
        if report_type == ReportType.runway_analysis:
            projections = project_scenarios(summary)
    elif report_type == ReportType.expense_breakdown:
        breakdown = await analytics.get_expense_breakdown(user.id)
    elif report_type == ReportType.transaction_history:
        rows = await get_transactions_for_user(user.id, db, limit=None)
        transactions = [
            TransactionRead.model_validate(tx, from_attributes=True).model_dump(mode="json")
            for tx in rows
        ]
    elif report_type == ReportType.budget_performance:
        overview = evaluate_budgets(
            await get_budgets_for_user(user.id, db),
            await analytics.get_expense_breakdown(user.id),
        )
        overview.pop("spent_by_id")
        for row in overview["budgets"] + overview["alerts"]:
            row["id"] = str(row["id"])
        budgets = overview

    data = build_report_data(
        report_type.value,
        now,
        month_start,
        month_end,
        summary=summary,
        breakdown=breakdown,
        projections=projections,
        transactions=transactions,
        budgets=budgets,
    )
    file_name = report_file_name(report_type.value, report_in.format.value, now)
    logger.info(f"Generated {file_name} for {user.email}")
    return await create_report_for_user(user.id, report_type.value, report_in.format.value, data, file_name, db)
