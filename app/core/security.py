from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import anyio
from fastapi import Depends, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings, settings as default_settings
from app.core.error_codes import INVALID_TOKEN, NOT_AUTHENTICATED
from app.core.exceptions import CustomHTTPException

# auto_error is off so a missing header gets the same error shape as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_pwd_context(rounds: int) -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=rounds
    )

@lru_cache
def _dummy_hash(rounds: int) -> str:
    # Checked against when the email is unknown so both failures cost one bcrypt round trip
    return get_pwd_context(rounds).hash("not-a-real-password")


def get_settings(request: Request) -> Settings:
    """Settings of the app serving this request"""
    return request.app.state.settings


def verify_password(plain_password: str, hashed_password: str, config: Optional[Settings] = None) -> bool:
    config = config or default_settings
    return get_pwd_context(config.BCRYPT_ROUNDS).verify(plain_password, hashed_password)

def get_password_hash(password: str, config: Optional[Settings] = None) -> str:
    config = config or default_settings
    return get_pwd_context(config.BCRYPT_ROUNDS).hash(password)

async def hash_password(password: str, config: Optional[Settings] = None) -> str:
    """bcrypt is CPU bound; run it off the event loop"""
    return await anyio.to_thread.run_sync(get_password_hash, password, config)

async def check_password(
    plain_password: str,
    hashed_password: Optional[str],
    config: Optional[Settings] = None
) -> bool:
    """Verify off the event loop. A missing hash still pays for one verification."""
    if hashed_password is None:
        config = config or default_settings
        await anyio.to_thread.run_sync(
            verify_password, plain_password, _dummy_hash(config.BCRYPT_ROUNDS), config
        )
        return False
    return await anyio.to_thread.run_sync(verify_password, plain_password, hashed_password, config)

def create_access_token(
    user_id: int,
    config: Optional[Settings] = None,
    expires_delta: Optional[timedelta] = None,
    issued_at: Optional[datetime] = None
) -> str:
    config = config or default_settings
    now = issued_at or datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))

    payload = {
        "sub": str(user_id),
        "userId": user_id,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)

def _credentials_exception(detail: str, error_code: str) -> CustomHTTPException:
    return CustomHTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        error_code=error_code,
        headers={"WWW-Authenticate": "Bearer"},
    )

def verify_token(token: str, config: Optional[Settings] = None) -> int:
    """Check signature and expiry, return the user id the token was issued for"""
    config = config or default_settings
    try:
        payload = jwt.decode(
            token,
            config.JWT_SECRET_KEY,
            algorithms=[config.JWT_ALGORITHM]
        )
    except JWTError as e:
        raise _credentials_exception(f"Invalid token: {e}", INVALID_TOKEN)

    user_id = payload.get("userId")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise _credentials_exception("Invalid token: missing user id", INVALID_TOKEN)
    return user_id

async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    config: Settings = Depends(get_settings)
) -> int:
    if credentials is None:
        raise _credentials_exception("Not authenticated", NOT_AUTHENTICATED)

    user_id = verify_token(credentials.credentials, config)
    request.state.user_id = user_id
    return user_id
