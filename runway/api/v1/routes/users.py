# runway/api/v1/routes/users.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel
from typing import Optional

from runway.core.database import get_async_session
from runway.core.auth import User, UserRead
from runway.api.deps import get_current_user

router = APIRouter(tags=["User Management"])

class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None

@router.get("/me", response_model=UserRead)
async def read_me(user: User = Depends(get_current_user)):
    return user

@router.patch("/me", response_model=UserRead)
async def update_me(
    profile_in: ProfileUpdate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    for field, value in profile_in.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user
