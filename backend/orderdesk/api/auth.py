"""
Authentication API endpoints
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from orderdesk.core.auth import create_access_token, verify_credentials
from orderdesk.core.config import Settings, get_settings
from orderdesk.schemas.auth import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, settings: Settings = Depends(get_settings)):
    """Authenticate and return a bearer token"""
    if not body.username.strip() or not body.password.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Username and password are required",
        )

    if not verify_credentials(body.username, body.password, settings):
        logger.warning(f"Failed login attempt for user '{body.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    return LoginResponse(
        token=create_access_token(body.username, settings),
        token_type="Bearer",
        expires_in=settings.JWT_EXPIRATION_MINUTES,
    )
