# runway/api/deps.py
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import jwt
import uuid

from runway.core.database import get_async_session
from runway.core.auth import User, TOKEN_AUDIENCE
from runway.core.config import settings
from runway.crud.storage import DatabaseStorage
from runway.utils.analytics import FinancialAnalytics
from runway.utils.bank_simulation import BankSimulator

# Security schemes
optional_security = HTTPBearer(auto_error=False)

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    # Authorization header first, then query parameter, then cookie
    if credentials and credentials.credentials:
        return credentials.credentials

    token = request.query_params.get("token") or request.query_params.get("access_token")
    if token:
        return token

    token = request.cookies.get("access_token")
    if token and token.startswith("Bearer "):
        token = token[7:]
    return token

async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security)
) -> User:
    """
    Resolve the current user from a bearer token found in:
    - Authorization header
    - Query parameters
    - Cookies
    """
    token = _extract_token(request, credentials)
    if not token:
        raise _unauthorized("Not authenticated")

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=TOKEN_AUDIENCE,
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError:
        raise _unauthorized("Invalid token")

    user_id_str = payload.get("sub")
    if not user_id_str:
        raise _unauthorized("Invalid token: missing user ID")

    try:
        user_id = uuid.UUID(user_id_str)
    except ValueError:
        raise _unauthorized("Invalid user ID format in token")

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalars().first()

    if not user:
        raise _unauthorized("User not found")
    if not user.is_active:
        raise _unauthorized("Inactive user")

    return user

# Optional version of get_current_user that doesn't raise exceptions
async def get_optional_current_user(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security)
) -> Optional[User]:
    try:
        return await get_current_user(request, db, credentials)
    except HTTPException:
        return None

async def get_analytics(db: AsyncSession = Depends(get_async_session)) -> FinancialAnalytics:
    """Analytics bound to this request's session."""
    return FinancialAnalytics(DatabaseStorage(db))

def get_bank_simulator() -> BankSimulator:
    return BankSimulator()
