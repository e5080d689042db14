"""
Interface for Contact Submission Repository.
Submissions are append-only apart from status transitions.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import ContactSubmission, ContactSubmissionCreate


class IContactSubmissionRepository(ABC):
    """Interface for contact form submission operations."""

    @abstractmethod
    async def get_all(self) -> List[ContactSubmission]:
        """
        List submissions newest first.

        Returns:
            List[ContactSubmission]: Sorted by created_at descending
        """
        pass

    @abstractmethod
    async def get_by_id(self, submission_id: str) -> Optional[ContactSubmission]:
        """Find a submission by ID."""
        pass

    @abstractmethod
    async def create(self, data: ContactSubmissionCreate) -> ContactSubmission:
        """
        Store a new submission with status ``pending``.

        Args:
            data: Form fields

        Returns:
            ContactSubmission: Created submission
        """
        pass

    @abstractmethod
    async def update_status(
        self, submission_id: str, status: str
    ) -> Optional[ContactSubmission]:
        """
        Change the status of a submission.

        Args:
            submission_id: ID of the submission
            status: New status value

        Returns:
            Optional[ContactSubmission]: Updated submission, None if not found
        """
        pass
