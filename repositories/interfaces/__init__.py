"""
Repository Interfaces.
"""

from .contact_submission_repository_interface import IContactSubmissionRepository
from .content_repository_interface import IContentRepository
from .destination_repository_interface import IDestinationRepository
from .gallery_repository_interface import IGalleryRepository
from .newsletter_repository_interface import INewsletterRepository
from .package_repository_interface import IPackageRepository
from .user_repository_interface import IUserRepository

__all__ = [
    "IContactSubmissionRepository",
    "IContentRepository",
    "IDestinationRepository",
    "IGalleryRepository",
    "INewsletterRepository",
    "IPackageRepository",
    "IUserRepository",
]
