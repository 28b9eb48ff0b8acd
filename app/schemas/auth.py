from pydantic import BaseModel, EmailStr

from app.schemas.base import CamelModel
from app.schemas.user import UserRead


class SigninRequest(BaseModel):
    email: EmailStr
    password: str


class SignupResponse(BaseModel):
    user: UserRead


class AuthResponse(CamelModel):
    """Signed bearer token plus the id it was issued for"""
    jwt: str
    user_id: int

