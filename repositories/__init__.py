"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .base_repository import BaseRepository
from .contact_submission_repository import ContactSubmissionRepository
from .content_repository import ContentRepository
from .destination_repository import DestinationRepository
from .gallery_repository import GalleryRepository
from .newsletter_repository import NewsletterRepository
from .package_repository import PackageRepository
from .storage import MemStorage
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "ContactSubmissionRepository",
    "ContentRepository",
    "DestinationRepository",
    "GalleryRepository",
    "MemStorage",
    "NewsletterRepository",
    "PackageRepository",
    "UserRepository",
]
