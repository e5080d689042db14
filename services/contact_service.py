"""
Service for contact form submissions.
"""

from typing import List, Optional

from core.logger import logger
from repositories.interfaces import IContactSubmissionRepository
from repositories.models import (
    ContactStatus,
    ContactSubmission,
    ContactSubmissionCreate,
)


class ContactService:
    def __init__(self, repository: IContactSubmissionRepository):
        self.repository = repository

    async def submit(self, data: ContactSubmissionCreate) -> ContactSubmission:
        submission = await self.repository.create(data)
        logger.info(f"New contact submission: id={submission.id}, subject={submission.subject!r}")
        return submission

    async def list_submissions(self) -> List[ContactSubmission]:
        return await self.repository.get_all()

    async def update_status(
        self, submission_id: str, status: ContactStatus
    ) -> Optional[ContactSubmission]:
        return await self.repository.update_status(submission_id, status.value)
