"""
In-memory newsletter subscription repository.
One record per email; re-subscribing reactivates instead of duplicating.
"""

from typing import List, Optional

from core.logger import logger
from repositories.base_repository import BaseRepository, Clock
from repositories.interfaces import INewsletterRepository
from repositories.models import NewsletterSubscription, NewsletterSubscriptionCreate


class NewsletterRepository(BaseRepository[NewsletterSubscription], INewsletterRepository):
    """Newsletter subscriptions keyed by ID."""

    def __init__(self, clock: Optional[Clock] = None):
        super().__init__("newsletter_subscriptions", clock)

    async def get_all(self) -> List[NewsletterSubscription]:
        return self._find_many(lambda s: s.is_active)

    async def get_by_email(self, email: str) -> Optional[NewsletterSubscription]:
        return self._find_one(lambda s: s.email == email)

    async def create(
        self, data: NewsletterSubscriptionCreate
    ) -> NewsletterSubscription:
        existing = await self.get_by_email(data.email)
        if existing:
            if not existing.is_active:
                logger.info(f"Reactivating newsletter subscription: id={existing.id}")
                return self._merge(existing.id, {"is_active": True})
            return existing

        subscription = NewsletterSubscription(
            id=self._new_id(),
            email=data.email,
            is_active=True,
            created_at=self._now(),
        )
        self._put(subscription.id, subscription)
        logger.info(f"Newsletter subscription created: id={subscription.id}")
        return subscription

    async def deactivate(self, email: str) -> Optional[NewsletterSubscription]:
        existing = await self.get_by_email(email)
        if existing is None:
            logger.warning("Newsletter subscription not found for deactivation")
            return None
        return self._merge(existing.id, {"is_active": False})
