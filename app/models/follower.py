from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class Follower(SQLModel, table=True):
    """Directed follow edge: `follow_by` follows `follow_to`"""
    __tablename__ = "followers"

    id: Optional[int] = Field(default=None, primary_key=True)
    follow_to: int = Field(foreign_key="users.id", nullable=False)
    follow_by: int = Field(
        foreign_key="users.id",
        nullable=False,
        index=True  # For faster "who do I follow" queries
    )
    follow_at: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
