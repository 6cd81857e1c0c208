# runway/crud/report.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import desc
from runway.models.report import Report
from typing import Any, Dict, List
import uuid

async def get_reports_for_user(user_id: uuid.UUID, db: AsyncSession) -> List[Report]:
    result = await db.execute(
        select(Report).where(Report.user_id == user_id).order_by(desc(Report.generated_at))
    )
    return result.scalars().all()

async def create_report_for_user(
    user_id: uuid.UUID,
    report_type: str,
    report_format: str,
    data: Dict[str, Any],
    file_name: str,
    db: AsyncSession,
) -> Report:
    new_report = Report(
        user_id=user_id,
        type=report_type,
        format=report_format,
        data=data,
        file_name=file_name,
    )
    db.add(new_report)
    await db.commit()
    await db.refresh(new_report)
    return new_report
