# runway/api/v1/routes/company.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from runway.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from runway.crud.company import create_company_for_user, get_company_for_user, update_company
from runway.core.database import get_async_session
from runway.core.auth import User
from runway.api.deps import get_current_user

router = APIRouter(prefix="/company", tags=["company"])

@router.get("", response_model=Optional[CompanyRead])
async def read_company(
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    # null until onboarding has been completed
    return await get_company_for_user(user.id, db)

@router.post("", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
async def create_company(
    company_in: CompanyCreate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    if await get_company_for_user(user.id, db):
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Company profile already exists")
    return await create_company_for_user(user.id, company_in, db)

@router.patch("", response_model=CompanyRead)
async def update_company_endpoint(
    company_in: CompanyUpdate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    company = await get_company_for_user(user.id, db)
    if not company:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Company not found")
    return await update_company(company, company_in, db)
