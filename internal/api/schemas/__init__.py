"""
API Schemas (Request/Response Models).
"""

from .auth_schemas import LoginRequest, TokenResponse
from .common_schemas import (
    StandardResponse,
    HealthResponse,
)
from .site_schemas import ContactStatusUpdate, NewsletterRequest, StatsResponse

__all__ = [
    # Common schemas
    "StandardResponse",
    "HealthResponse",
    # Auth schemas
    "LoginRequest",
    "TokenResponse",
    # Site schemas
    "ContactStatusUpdate",
    "NewsletterRequest",
    "StatsResponse",
]
