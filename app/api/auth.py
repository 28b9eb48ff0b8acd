"""
Signup and signin endpoints
"""

import logging
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.db.database import get_db
from app.core.config import Settings
from app.schemas.auth import SigninRequest, SignupResponse, AuthResponse
from app.schemas.user import UserCreate, to_public_view
from app.core.security import get_settings, hash_password, check_password, create_access_token
from app.crud.user import create_user, get_user_by_email
from app.core.exceptions import CustomHTTPException
from app.core.error_codes import INVALID_CREDENTIALS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post("/signup", response_model=SignupResponse)
async def signup(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db),
    config: Settings = Depends(get_settings)
):
    """Create an account. The response never carries the password hash."""
    hashed_password = await hash_password(user_in.password, config)

    async with db.begin():
        user = await create_user(db, user_in, hashed_password)

    logger.info(f"New user signed up: id={user.id} handle={user.handle}")
    return {"user": to_public_view(user)}


@router.post("/signin", response_model=AuthResponse)
async def signin(
    credentials: SigninRequest,
    db: AsyncSession = Depends(get_db),
    config: Settings = Depends(get_settings)
):
    async with db.begin():
        user = await get_user_by_email(db, credentials.email)

        # Unknown emails still run a bcrypt check so both failures take as long
        stored_hash = user.password if user else None
        if not await check_password(credentials.password, stored_hash, config):
            logger.warning(f"Failed signin attempt for: {credentials.email}")
            raise CustomHTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
                error_code=INVALID_CREDENTIALS,
                headers={"WWW-Authenticate": "Bearer"},
            )

        user_id = user.id

    return AuthResponse(jwt=create_access_token(user_id, config), user_id=user_id)
