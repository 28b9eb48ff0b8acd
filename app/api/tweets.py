"""
Tweet endpoints (Posting & Feed)
"""
import logging
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.db.database import get_db
from app.core.security import get_current_user_id
from app.crud.tweet import create_tweet, get_feed
from app.schemas.tweet import TweetCreate, TweetResponse, TweetListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tweets", tags=["tweets"])


@router.get("", response_model=TweetListResponse)
async def read_feed(
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    async with db.begin():
        tweets = await get_feed(db, current_user_id)
    return {"tweets": tweets}


@router.post("", response_model=TweetResponse)
async def post_tweet(
    tweet_in: TweetCreate,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    async with db.begin():
        tweet = await create_tweet(db, current_user_id, tweet_in.text)

    logger.info(f"User {current_user_id} posted tweet {tweet.id}")
    return {"tweet": tweet}
