from datetime import datetime
from typing import List

from pydantic import BaseModel, field_validator

from app.schemas.base import CamelModel, as_utc


class FollowerRead(CamelModel):
    id: int
    follow_to: int
    follow_by: int
    follow_at: datetime

    @field_validator("follow_at")
    @classmethod
    def follow_at_in_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class FollowerResponse(BaseModel):
    follower: FollowerRead


class FollowerListResponse(BaseModel):
    followers: List[FollowerRead]
