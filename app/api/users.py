import logging
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.db.database import get_db
from app.core.security import get_current_user_id
from app.crud.user import get_user_or_404
from app.crud.follower import follow_user, get_following
from app.schemas.user import UserResponse, to_public_view
from app.schemas.follower import FollowerResponse, FollowerListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
async def read_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    async with db.begin():
        user = await get_user_or_404(db, user_id)
    return {"user": to_public_view(user)}


@router.get("/{user_id}/followers", response_model=FollowerListResponse)
async def list_following(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    """Follow edges created by `user_id`, i.e. the accounts that user follows"""
    async with db.begin():
        await get_user_or_404(db, user_id)
        followers = await get_following(db, user_id)
    return {"followers": followers}


@router.post("/{user_id}/followers", response_model=FollowerResponse)
async def follow(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    """The caller starts following `user_id`. Following twice is a no-op."""
    async with db.begin():
        await get_user_or_404(db, user_id)
        follower = await follow_user(db, follow_by=current_user_id, follow_to=user_id)

    logger.info(f"User {current_user_id} follows user {user_id}")
    return {"follower": follower}
