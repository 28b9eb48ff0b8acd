from typing import Optional

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """Account record. `password` holds the bcrypt hash, never the plaintext."""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    handle: str = Field(..., unique=True, nullable=False)
    name: str = Field(..., nullable=False)
    email: str = Field(..., unique=True, index=True, nullable=False)
    password: str = Field(..., nullable=False)
