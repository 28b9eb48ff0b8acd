from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator

from app.schemas.base import CamelModel, as_utc


class TweetCreate(BaseModel):
    text: str = Field(..., min_length=1)


class TweetRead(CamelModel):
    id: int
    text: str
    tweeted_by: int
    tweeted_at: datetime

    @field_validator("tweeted_at")
    @classmethod
    def tweeted_at_in_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class TweetResponse(BaseModel):
    tweet: TweetRead


class TweetListResponse(BaseModel):
    tweets: List[TweetRead]
