"""
Service for newsletter subscriptions.
"""

from typing import List, Optional

from core.logger import logger
from repositories.interfaces import INewsletterRepository
from repositories.models import NewsletterSubscription, NewsletterSubscriptionCreate


class NewsletterService:
    def __init__(self, repository: INewsletterRepository):
        self.repository = repository

    async def subscribe(self, email: str) -> NewsletterSubscription:
        subscription = await self.repository.create(
            NewsletterSubscriptionCreate(email=email)
        )
        logger.info(f"Newsletter subscribe: id={subscription.id}")
        return subscription

    async def unsubscribe(self, email: str) -> Optional[NewsletterSubscription]:
        return await self.repository.deactivate(email)

    async def list_subscriptions(self) -> List[NewsletterSubscription]:
        return await self.repository.get_all()
