"""
Authentication for the OrderDesk API
Issues and validates HS256 JWT bearer tokens
"""
import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from orderdesk.core.config import Settings, get_settings

JWT_ALGORITHM = "HS256"

# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)


class TokenUser(BaseModel):
    """User data extracted from JWT token"""
    username: str
    token_id: Optional[str] = None


def verify_credentials(username: str, password: str, settings: Settings) -> bool:
    """Constant-time comparison against the configured account"""
    user_ok = secrets.compare_digest(username.encode(), settings.AUTH_USERNAME.encode())
    password_ok = secrets.compare_digest(password.encode(), settings.AUTH_PASSWORD.encode())
    return user_ok and password_ok


def create_access_token(username: str, settings: Settings, now: Optional[datetime] = None) -> str:
    """
    Create a signed JWT for `username`

    Claims: sub, name, jti, iss, aud, iat, exp
    """
    now = now or datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "name": username,
        "jti": str(uuid.uuid4()),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict:
    """Decode and validate a token, raising 401 on any problem"""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError as e:
        if "expired" in str(e).lower():
            detail = "Token has expired"
        else:
            detail = f"Invalid token: {e}"
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> TokenUser:
    """
    Dependency that extracts and validates the current user from JWT.

    Usage:
        @router.get("/protected")
        async def protected_route(user: TokenUser = Depends(get_current_user)):
            return {"message": f"Hello {user.username}"}
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials, settings)

    username = payload.get("sub")
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload: missing subject",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return TokenUser(username=username, token_id=payload.get("jti"))


async def require_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Optional[TokenUser]:
    """
    Guard for mutating endpoints. Only enforced when AUTH_REQUIRED is set,
    otherwise anonymous callers pass through with None.
    """
    if not settings.AUTH_REQUIRED:
        return None
    return await get_current_user(credentials, settings)
