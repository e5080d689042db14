"""
Service computing the admin dashboard counters.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

from core.logger import logger
from repositories.interfaces import (
    IContactSubmissionRepository,
    INewsletterRepository,
)
from repositories.models import utcnow


def _month_start(moment: datetime) -> datetime:
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def _previous_month_start(moment: datetime) -> datetime:
    start = _month_start(moment)
    if start.month == 1:
        return start.replace(year=start.year - 1, month=12)
    return start.replace(month=start.month - 1)


def growth_percent(current: int, previous: int) -> int:
    """
    Month-over-month change as a whole percentage.

    100 when the previous month had nothing and this month has something,
    0 when both are empty.
    """
    if previous == 0:
        return 100 if current > 0 else 0
    return round((current - previous) * 100 / previous)


class StatsService:
    """Aggregates counts for the dashboard overview cards."""

    def __init__(
        self,
        contact_submissions: IContactSubmissionRepository,
        newsletter_subscriptions: INewsletterRepository,
    ):
        self.contact_submissions = contact_submissions
        self.newsletter_subscriptions = newsletter_subscriptions

    async def get_stats(self, now: Optional[datetime] = None) -> Dict[str, int]:
        """
        Compute dashboard statistics.

        Args:
            now: Reference time, defaults to the current UTC time

        Returns:
            Dict with contactForms, newsletter, thisMonth and growth
        """
        now = now or utcnow()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        this_month_start = _month_start(now)
        last_month_start = _previous_month_start(now)

        submissions = await self.contact_submissions.get_all()
        this_month = 0
        last_month = 0
        for submission in submissions:
            created_at = submission.created_at
            if created_at is None:
                continue
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=timezone.utc)
            if created_at >= this_month_start:
                this_month += 1
            elif created_at >= last_month_start:
                last_month += 1

        subscriptions = await self.newsletter_subscriptions.get_all()
        stats = {
            "contactForms": len(submissions),
            "newsletter": len(subscriptions),
            "thisMonth": this_month,
            "growth": growth_percent(this_month, last_month),
        }
        logger.debug(f"Dashboard stats: {stats}")
        return stats
