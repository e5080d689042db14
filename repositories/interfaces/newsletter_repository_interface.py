"""
Interface for Newsletter Subscription Repository.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import NewsletterSubscription, NewsletterSubscriptionCreate


class INewsletterRepository(ABC):
    """Interface for newsletter subscription operations."""

    @abstractmethod
    async def get_all(self) -> List[NewsletterSubscription]:
        """List active subscriptions."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[NewsletterSubscription]:
        """Find a subscription by exact (case-sensitive) email."""
        pass

    @abstractmethod
    async def create(
        self, data: NewsletterSubscriptionCreate
    ) -> NewsletterSubscription:
        """
        Subscribe an email address.

        An existing active record is returned unchanged; an inactive one is
        reactivated. A new record is only created for unknown emails.

        Args:
            data: Subscriber email

        Returns:
            NewsletterSubscription: The single record for that email
        """
        pass

    @abstractmethod
    async def deactivate(self, email: str) -> Optional[NewsletterSubscription]:
        """
        Mark a subscription inactive.

        Args:
            email: Subscriber email

        Returns:
            Optional[NewsletterSubscription]: Updated record, None if unknown
        """
        pass
