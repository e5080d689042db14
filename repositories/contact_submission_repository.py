"""
In-memory contact submission repository.
"""

from typing import List, Optional

from core.logger import logger
from repositories.base_repository import BaseRepository, Clock
from repositories.interfaces import IContactSubmissionRepository
from repositories.models import (
    EPOCH,
    ContactStatus,
    ContactSubmission,
    ContactSubmissionCreate,
)


class ContactSubmissionRepository(
    BaseRepository[ContactSubmission], IContactSubmissionRepository
):
    """Contact form submissions keyed by ID."""

    def __init__(self, clock: Optional[Clock] = None):
        super().__init__("contact_submissions", clock)

    async def get_all(self) -> List[ContactSubmission]:
        # Newest first; missing timestamps sort as the epoch
        return sorted(
            self._values(),
            key=lambda s: s.created_at or EPOCH,
            reverse=True,
        )

    async def get_by_id(self, submission_id: str) -> Optional[ContactSubmission]:
        return self._get(submission_id)

    async def create(self, data: ContactSubmissionCreate) -> ContactSubmission:
        submission = ContactSubmission(
            id=self._new_id(),
            **data.model_dump(),
            status=ContactStatus.PENDING.value,
            created_at=self._now(),
        )
        self._put(submission.id, submission)
        logger.info(f"Contact submission stored: id={submission.id}, email={submission.email}")
        return submission

    async def update_status(
        self, submission_id: str, status: str
    ) -> Optional[ContactSubmission]:
        if isinstance(status, ContactStatus):
            status = status.value
        updated = self._merge(submission_id, {"status": status})
        if updated is None:
            logger.warning(f"Contact submission not found: id={submission_id}")
        return updated
