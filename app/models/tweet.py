from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class Tweet(SQLModel, table=True):
    __tablename__ = "tweets"

    id: Optional[int] = Field(default=None, primary_key=True)
    text: str = Field(..., nullable=False)
    tweeted_by: int = Field(
        foreign_key="users.id",
        nullable=False,
        index=True  # For faster feed queries
    )
    # Stamped by the server at insert time, see crud.tweet.create_tweet
    tweeted_at: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
