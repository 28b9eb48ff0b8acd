from datetime import datetime, timezone
from typing import List, Optional

from sqlmodel import select, col
from sqlmodel.ext.asyncio.session import AsyncSession

from app.models.follower import Follower


async def get_follow_edge(session: AsyncSession, follow_by: int, follow_to: int) -> Optional[Follower]:
    result = await session.exec(
        select(Follower).where(
            Follower.follow_by == follow_by,
            Follower.follow_to == follow_to
        ).order_by(col(Follower.id))
    )
    return result.first()


async def follow_user(session: AsyncSession, follow_by: int, follow_to: int) -> Follower:
    """Create a follow edge, or return the existing one if already following"""
    existing = await get_follow_edge(session, follow_by, follow_to)
    if existing:
        return existing

    follow_entry = Follower(
        follow_to=follow_to,
        follow_by=follow_by,
        follow_at=datetime.now(timezone.utc)
    )
    session.add(follow_entry)
    await session.flush()
    return follow_entry


async def get_following(session: AsyncSession, user_id: int) -> List[Follower]:
    """Follow edges created by `user_id`, i.e. who they follow"""
    result = await session.exec(
        select(Follower)
        .where(Follower.follow_by == user_id)
        .order_by(col(Follower.id))
    )
    return list(result.all())
