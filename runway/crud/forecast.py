# runway/crud/forecast.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import desc
from runway.models.forecast import Forecast
from typing import List, Optional
import uuid

async def get_forecasts_for_user(user_id: uuid.UUID, db: AsyncSession) -> List[Forecast]:
    result = await db.execute(
        select(Forecast).where(Forecast.user_id == user_id).order_by(desc(Forecast.created_at))
    )
    return result.scalars().all()

async def get_forecast_by_id(forecast_id: uuid.UUID, user_id: uuid.UUID, db: AsyncSession) -> Optional[Forecast]:
    result = await db.execute(
        select(Forecast).where(Forecast.id == forecast_id, Forecast.user_id == user_id)
    )
    return result.scalar_one_or_none()

async def create_forecasts(forecasts: List[Forecast], db: AsyncSession) -> List[Forecast]:
    if not forecasts:
        return []
    db.add_all(forecasts)
    await db.commit()
    for f in forecasts:
        await db.refresh(f)
    return forecasts

async def delete_forecast(forecast: Forecast, db: AsyncSession) -> None:
    await db.delete(forecast)
    await db.commit()
