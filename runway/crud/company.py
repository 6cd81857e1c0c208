# runway/crud/company.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from runway.models.company import Company
from typing import Optional
import uuid
from runway.schemas.company import CompanyCreate, CompanyUpdate

async def get_company_for_user(user_id: uuid.UUID, db: AsyncSession) -> Optional[Company]:
    result = await db.execute(select(Company).where(Company.user_id == user_id))
    return result.scalar_one_or_none()

async def create_company_for_user(user_id: uuid.UUID, company_in: CompanyCreate, db: AsyncSession) -> Company:
    new_company = Company(**company_in.model_dump(), user_id=user_id)
    db.add(new_company)
    await db.commit()
    await db.refresh(new_company)
    return new_company

async def update_company(company: Company, company_in: CompanyUpdate, db: AsyncSession) -> Company:
    for field, value in company_in.model_dump(exclude_unset=True).items():
        setattr(company, field, value)
    db.add(company)
    await db.commit()
    await db.refresh(company)
    return company
