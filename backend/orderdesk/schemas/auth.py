from pydantic import Field

from orderdesk.schemas.base import CamelModel


class LoginRequest(CamelModel):
    username: str = ""
    password: str = ""


class LoginResponse(CamelModel):
    token: str
    token_type: str = "Bearer"
    expires_in: int = Field(..., description="Token lifetime in minutes")
