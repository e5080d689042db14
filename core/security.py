"""
Password hashing and access token helpers.
bcrypt for salted password hashes, python-jose for signed JWT access tokens.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from core.logger import logger


class InvalidTokenError(Exception):
    """Raised when an access token cannot be decoded or has expired."""


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash password using bcrypt with a fresh salt."""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        # Malformed hash
        logger.warning(f"Password hash could not be checked: {e}")
        return False


def create_access_token(
    subject: str,
    secret_key: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = None,
    extra_claims: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        subject: Value for the ``sub`` claim (user id)
        secret_key: Signing key
        algorithm: JWT signing algorithm
        expires_delta: Token lifetime, defaults to 30 minutes
        extra_claims: Additional claims merged into the payload

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=30))

    to_encode: Dict[str, Any] = dict(extra_claims or {})
    to_encode.update(
        {
            "sub": subject,
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": expire,
        }
    )
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_access_token(
    token: str, secret_key: str, algorithm: str = "HS256"
) -> Dict[str, Any]:
    """
    Decode and verify a JWT access token.

    Raises:
        InvalidTokenError: If the signature is invalid or the token expired
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e
