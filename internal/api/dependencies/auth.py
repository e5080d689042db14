"""
Authentication dependencies for admin API endpoints.
"""

from typing import Awaitable, Callable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.logger import logger
from repositories.models import User
from services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def create_admin_dependency(
    auth_service: AuthService,
) -> Callable[..., Awaitable[User]]:
    """
    Build the dependency guarding admin endpoints.

    Args:
        auth_service: Service resolving bearer tokens to users

    Returns:
        Dependency returning the authenticated user

    Raises:
        HTTPException: 401 if the token is missing, invalid or revoked
    """

    async def require_admin(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> User:
        if credentials is None:
            logger.warning("Missing bearer token in admin request")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not authenticated",
                headers={"WWW-Authenticate": "Bearer"},
            )

        user = await auth_service.resolve_token(credentials.credentials)
        if user is None:
            logger.warning("Invalid or revoked bearer token in admin request")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return user

    return require_admin
