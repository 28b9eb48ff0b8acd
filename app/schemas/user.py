from pydantic import BaseModel, EmailStr, Field

from app.models.user import User
from app.schemas.base import CamelModel


class UserCreate(BaseModel):
    handle: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserRead(CamelModel):
    """Public view of a user. Has no password field on purpose."""
    id: int
    handle: str
    name: str
    email: str


def to_public_view(user: User) -> UserRead:
    return UserRead.model_validate(user)


class UserResponse(BaseModel):
    user: UserRead
