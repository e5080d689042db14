"""
Authentication request/response schemas.
"""

from pydantic import Field

from repositories.models import CamelModel, User


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    """Bearer token issued on successful login."""

    token: str
    token_type: str = "bearer"
    expires_in: int
    user: User
