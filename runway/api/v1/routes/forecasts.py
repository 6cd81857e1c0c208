# runway/api/v1/routes/forecasts.py
import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from runway.schemas.forecast import ForecastGenerateRequest, ForecastRead, ScenarioResult
from runway.crud.forecast import create_forecasts, delete_forecast, get_forecast_by_id, get_forecasts_for_user
from runway.models.forecast import Forecast
from runway.core.database import get_async_session
from runway.core.auth import User
from runway.api.deps import get_analytics, get_current_user
from runway.utils.analytics import FinancialAnalytics
from runway.utils.forecasting import DEFAULT_PROJECTION_MONTHS, Scenario, project_scenarios

router = APIRouter(prefix="/forecasts", tags=["forecasts"])

# Bounds of a runway_months column (5 digits, 2 places)
MAX_STORED_RUNWAY = 999

def _storable_runway(runway_months):
    # negative balances give negative runway
    return round(max(-MAX_STORED_RUNWAY, min(runway_months, MAX_STORED_RUNWAY)), 2)

@router.get("", response_model=List[ForecastRead])
async def read_forecasts(
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    return await get_forecasts_for_user(user.id, db)

@router.get("/scenarios", response_model=List[ScenarioResult])
async def preview_scenarios(
    months: int = Query(DEFAULT_PROJECTION_MONTHS, ge=1, le=60),
    analytics: FinancialAnalytics = Depends(get_analytics),
    user: User = Depends(get_current_user),
):
    """Runway and balance projection for the optimistic / realistic / pessimistic defaults."""
    summary = await analytics.get_financial_summary(user.id)
    return [p.to_dict() for p in project_scenarios(summary, months=months)]

@router.post("/generate", response_model=List[ForecastRead], status_code=status.HTTP_201_CREATED)
async def generate_forecasts(
    request_in: ForecastGenerateRequest,
    db: AsyncSession = Depends(get_async_session),
    analytics: FinancialAnalytics = Depends(get_analytics),
    user: User = Depends(get_current_user),
):
    """Project each scenario (defaults when none are given) and store the result."""
    summary = await analytics.get_financial_summary(user.id)
    scenarios = None
    if request_in.scenarios:
        scenarios = [Scenario(s.name, s.revenue_growth, s.burn_change) for s in request_in.scenarios]

    projections = project_scenarios(summary, scenarios, months=request_in.months)
    forecasts = [
        Forecast(
            user_id=user.id,
            scenario_type=p.scenario.name,
            projected_revenue=round(p.projected_revenue, 2),
            projected_expenses=round(p.projected_expenses, 2),
            runway_months=_storable_runway(p.runway_months),
            assumptions={
                "revenue_growth": p.scenario.revenue_growth,
                "burn_change": p.scenario.burn_change,
                "months": request_in.months,
                "base_balance": float(summary.total_balance),
                "base_revenue": float(summary.monthly_revenue),
                "base_expenses": float(summary.monthly_expenses),
            },
            projection_data={"balances": [float(b) for b in p.balances]},
        )
        for p in projections
    ]
    return await create_forecasts(forecasts, db)

@router.get("/{forecast_id}", response_model=ForecastRead)
async def read_forecast(
    forecast_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    forecast = await get_forecast_by_id(forecast_id, user.id, db)
    if not forecast:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Forecast not found")
    return forecast

@router.delete("/{forecast_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_forecast_endpoint(
    forecast_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    forecast = await get_forecast_by_id(forecast_id, user.id, db)
    if not forecast:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Forecast not found")
    await delete_forecast(forecast, db)
    return None
