"""
User data access. Functions only flush; the caller owns the transaction.
"""
import logging
from typing import Optional

from fastapi import status
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.models.user import User
from app.schemas.user import UserCreate
from app.core.exceptions import CustomHTTPException
from app.core.error_codes import USER_ALREADY_EXISTS, USER_NOT_FOUND

logger = logging.getLogger(__name__)


async def create_user(session: AsyncSession, user_in: UserCreate, hashed_password: str) -> User:
    """
    Insert a new user.

    Uniqueness of handle and email is left to the database constraints, so
    two racing signups cannot both succeed.
    """
    db_user = User(
        handle=user_in.handle,
        name=user_in.name,
        email=user_in.email,
        password=hashed_password
    )
    session.add(db_user)
    try:
        await session.flush()
    except IntegrityError as e:
        logger.info(f"Signup rejected for handle={user_in.handle!r}: {e.orig}")
        raise CustomHTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Handle or email already registered",
            error_code=USER_ALREADY_EXISTS
        )
    return db_user


async def get_user_by_id(session: AsyncSession, user_id: int) -> Optional[User]:
    return await session.get(User, user_id)


async def get_user_or_404(session: AsyncSession, user_id: int) -> User:
    user = await get_user_by_id(session, user_id)
    if user is None:
        raise CustomHTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {user_id} not found",
            error_code=USER_NOT_FOUND
        )
    return user


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.exec(select(User).where(User.email == email))
    return result.first()
