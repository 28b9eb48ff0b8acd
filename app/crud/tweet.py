from datetime import datetime, timezone
from typing import List

from sqlmodel import select, col
from sqlmodel.ext.asyncio.session import AsyncSession

from app.models.tweet import Tweet
from app.models.follower import Follower


async def create_tweet(session: AsyncSession, author_id: int, text: str) -> Tweet:
    """Insert a tweet; the timestamp always comes from the server clock"""
    tweet = Tweet(
        text=text,
        tweeted_by=author_id,
        tweeted_at=datetime.now(timezone.utc)
    )
    session.add(tweet)
    await session.flush()
    return tweet


async def get_feed(session: AsyncSession, user_id: int) -> List[Tweet]:
    """Tweets by every user that `user_id` follows, newest first"""
    # IN (subquery) has set semantics, so duplicate follow edges don't repeat tweets
    followed_ids = select(Follower.follow_to).where(Follower.follow_by == user_id)
    result = await session.exec(
        select(Tweet)
        .where(col(Tweet.tweeted_by).in_(followed_ids))
        .order_by(col(Tweet.tweeted_at).desc(), col(Tweet.id).desc())
    )
    return list(result.all())
