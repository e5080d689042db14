"""
In-memory store bundling one repository per entity family.
State lives for the lifetime of the MemStorage instance; nothing is persisted.
"""

from typing import Optional

from core.logger import logger
from repositories.base_repository import Clock, new_id
from repositories.contact_submission_repository import ContactSubmissionRepository
from repositories.content_repository import ContentRepository
from repositories.destination_repository import DestinationRepository
from repositories.gallery_repository import GalleryRepository
from repositories.models import (
    DEFAULT_DESTINATION_ICON,
    Content,
    Destination,
    DestinationType,
    User,
    utcnow,
)
from repositories.newsletter_repository import NewsletterRepository
from repositories.package_repository import PackageRepository
from repositories.seed_data import (
    DEFAULT_CONTENT,
    DOMESTIC_DESTINATIONS,
    DOMESTIC_IMAGE_URL,
    INTERNATIONAL_DESTINATIONS,
    INTERNATIONAL_IMAGE_URL,
    placeholder_form_url,
)
from repositories.user_repository import UserRepository


class MemStorage:
    """
    Process-local store. Pass one instance explicitly to whatever needs it.

    Args:
        admin_username: Username of the seeded admin account
        admin_password_hash: bcrypt hash for the seeded admin, no admin is
            created when omitted
        seed: Load default content and the destination catalogue
        clock: Timestamp source shared by all repositories
    """

    def __init__(
        self,
        admin_username: str = "admin",
        admin_password_hash: Optional[str] = None,
        seed: bool = True,
        clock: Optional[Clock] = None,
    ):
        self._clock = clock or utcnow
        self.users = UserRepository(clock)
        self.destinations = DestinationRepository(clock)
        self.content = ContentRepository(clock)
        self.contact_submissions = ContactSubmissionRepository(clock)
        self.newsletter_subscriptions = NewsletterRepository(clock)
        self.packages = PackageRepository(clock)
        self.gallery = GalleryRepository(clock)

        if admin_password_hash:
            self._seed_admin(admin_username, admin_password_hash)
        if seed:
            self._initialize_default_data()

    def _seed_admin(self, username: str, password_hash: str) -> None:
        self.users.load(
            [User(id=new_id(), username=username, password_hash=password_hash)]
        )
        logger.info(f"Admin user seeded: username={username}")

    def _initialize_default_data(self) -> None:
        now = self._clock()
        self.content.load(
            (
                Content(id=new_id(), key=key, value=value, updated_at=now)
                for key, value in DEFAULT_CONTENT.items()
            ),
            key=lambda c: c.key,
        )

        catalogue = [
            (DestinationType.DOMESTIC, DOMESTIC_IMAGE_URL, DOMESTIC_DESTINATIONS),
            (DestinationType.INTERNATIONAL, INTERNATIONAL_IMAGE_URL, INTERNATIONAL_DESTINATIONS),
        ]
        for destination_type, image_url, names in catalogue:
            self.destinations.load(
                Destination(
                    id=new_id(),
                    name=name,
                    type=destination_type,
                    image_url=image_url,
                    form_url=placeholder_form_url(name),
                    icon=DEFAULT_DESTINATION_ICON,
                    is_active=True,
                    created_at=now,
                )
                for name in names
            )

        logger.info(
            f"Default data loaded: content={self.content.count()}, "
            f"destinations={self.destinations.count()}"
        )
