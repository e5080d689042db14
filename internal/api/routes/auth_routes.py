"""
Authentication API Routes.
"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from core.logger import logger
from internal.api.dependencies import bearer_scheme
from internal.api.schemas import LoginRequest, StandardResponse, TokenResponse
from internal.api.utils import success_response
from repositories.models import User
from services.auth_service import AuthService


def create_auth_routes(auth_service: AuthService, require_admin: Callable) -> APIRouter:
    """
    Factory function to create authentication routes.

    Args:
        auth_service: Service handling login and token revocation
        require_admin: Dependency resolving the authenticated admin

    Returns:
        APIRouter: Router with login, logout and me endpoints
    """
    router = APIRouter(prefix="/api/auth", tags=["Auth"])

    @router.post(
        "/login",
        response_model=TokenResponse,
        summary="Admin Login",
        description="Exchange username and password for a bearer token",
        responses={401: {"description": "Invalid username or password"}},
    )
    async def login(request: LoginRequest):
        """
        Log in to the admin dashboard.

        **Returns:**
        - token: Bearer token for the Authorization header
        - expiresIn: Token lifetime in seconds
        - user: The authenticated user
        """
        result = await auth_service.login(request.username, request.password)
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid username or password",
            )
        return TokenResponse(**result)

    @router.post(
        "/logout",
        response_model=StandardResponse,
        summary="Admin Logout",
        description="Revoke the presented bearer token",
    )
    async def logout(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ):
        """Log out. Always succeeds; a valid bearer token is revoked."""
        token = credentials.credentials if credentials else None
        revoked = await auth_service.logout(token)
        logger.info(f"API: Logout request, token revoked={revoked}")
        return success_response(message="Logout successful", data={"revoked": revoked})

    @router.get(
        "/me",
        response_model=User,
        summary="Current User",
        description="Get the user owning the bearer token",
        responses={401: {"description": "Not authenticated"}},
    )
    async def me(user: User = Depends(require_admin)):
        return user

    return router
