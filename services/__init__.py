"""
Service layer implementing business logic.
Follows Service Layer Pattern and Single Responsibility Principle.
"""

from .auth_service import AuthService
from .contact_service import ContactService
from .content_service import ContentService
from .destination_service import DestinationService
from .gallery_service import GalleryService
from .newsletter_service import NewsletterService
from .package_service import PackageService
from .stats_service import StatsService

__all__ = [
    "AuthService",
    "ContactService",
    "ContentService",
    "DestinationService",
    "GalleryService",
    "NewsletterService",
    "PackageService",
    "StatsService",
]
