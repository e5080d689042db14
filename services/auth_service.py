"""
Service for back-office authentication.
Verifies bcrypt password hashes and issues/revokes JWT bearer tokens.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from core.config import Settings
from core.logger import logger
from core.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    verify_password,
)
from repositories.interfaces import IUserRepository
from repositories.models import User


class AuthService:
    """Handles admin login, logout and token resolution."""

    def __init__(self, users: IUserRepository, settings: Settings):
        self.users = users
        self.settings = settings
        # jti -> exp (epoch seconds) of tokens revoked by logout
        self._revoked: Dict[str, int] = {}
        logger.debug("AuthService initialized")

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Check a username/password pair.

        Args:
            username: Login name
            password: Plaintext password from the login form

        Returns:
            User if credentials match, None otherwise
        """
        user = await self.users.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt: username={username}")
            return None
        return user

    async def login(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Authenticate and issue an access token.

        Returns:
            Token payload for the API response, None on bad credentials
        """
        user = await self.authenticate(username, password)
        if user is None:
            return None

        expires_minutes = self.settings.access_token_expire_minutes
        token = create_access_token(
            subject=user.id,
            secret_key=self.settings.jwt_secret_key,
            algorithm=self.settings.jwt_algorithm,
            expires_delta=timedelta(minutes=expires_minutes),
            extra_claims={"username": user.username},
        )
        logger.info(f"Login successful: username={user.username}")
        return {
            "token": token,
            "token_type": "bearer",
            "expires_in": expires_minutes * 60,
            "user": user,
        }

    def _decode(self, token: str) -> Optional[Dict[str, Any]]:
        try:
            return decode_access_token(
                token, self.settings.jwt_secret_key, self.settings.jwt_algorithm
            )
        except InvalidTokenError as e:
            logger.debug(f"Rejected access token: {e}")
            return None

    def _prune_revoked(self) -> None:
        """Forget revoked tokens that have expired anyway."""
        now = datetime.now(timezone.utc).timestamp()
        expired = [jti for jti, exp in self._revoked.items() if exp <= now]
        for jti in expired:
            del self._revoked[jti]
        if expired:
            logger.debug(f"Pruned {len(expired)} expired revoked tokens")

    async def resolve_token(self, token: str) -> Optional[User]:
        """
        Map a bearer token to its user.

        Returns:
            User for a valid, unrevoked token, None otherwise
        """
        claims = self._decode(token)
        if claims is None:
            return None
        if claims.get("jti") in self._revoked:
            logger.debug("Rejected revoked access token")
            return None
        return await self.users.get_by_id(claims.get("sub", ""))

    async def logout(self, token: Optional[str]) -> bool:
        """
        Revoke a token. Unknown or invalid tokens are ignored.

        Returns:
            True if a valid token was revoked
        """
        if not token:
            return False
        claims = self._decode(token)
        if claims is None or "jti" not in claims:
            return False
        self._prune_revoked()
        self._revoked[claims["jti"]] = int(claims.get("exp", 0))
        logger.info(f"Logout: username={claims.get('username')}")
        return True
