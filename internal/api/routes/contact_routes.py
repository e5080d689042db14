"""
Contact Form API Routes.
"""

from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException, status

from core.logger import logger
from internal.api.schemas import ContactStatusUpdate
from repositories.models import ContactSubmission, ContactSubmissionCreate
from services.contact_service import ContactService


def create_contact_routes(
    contact_service: ContactService, require_admin: Callable
) -> APIRouter:
    """
    Factory function to create contact form routes.

    Args:
        contact_service: Service over contact submissions
        require_admin: Dependency guarding admin endpoints

    Returns:
        APIRouter: Router with the public form endpoint and admin inbox
    """
    router = APIRouter(tags=["Contact"])
    admin = [Depends(require_admin)]

    @router.post(
        "/api/contact",
        response_model=ContactSubmission,
        status_code=status.HTTP_201_CREATED,
        summary="Submit Contact Form",
        description="Store a message from the public contact page",
        responses={422: {"description": "Missing or invalid form fields"}},
    )
    async def submit_contact_form(request: ContactSubmissionCreate):
        """
        Submit the contact form.

        **Parameters:**
        - **firstName**, **lastName**: Sender name
        - **email**: Reply address
        - **subject**: Message subject
        - **message**: Message body

        New submissions start with status `pending`.
        """
        try:
            logger.info(f"API: Contact form received: email={request.email}")
            return await contact_service.submit(request)
        except Exception as e:
            logger.error(f"API: Failed to store contact submission: {e}")
            logger.exception("Contact submission error details:")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to submit contact form: {str(e)}",
            )

    @router.get(
        "/api/admin/contact-submissions",
        response_model=List[ContactSubmission],
        summary="Admin: List Contact Submissions",
        description="All submissions, newest first",
        dependencies=admin,
    )
    async def list_contact_submissions():
        return await contact_service.list_submissions()

    @router.put(
        "/api/admin/contact-submissions/{submission_id}/status",
        response_model=ContactSubmission,
        summary="Admin: Update Submission Status",
        responses={404: {"description": "Submission not found"}},
        dependencies=admin,
    )
    async def update_submission_status(
        submission_id: str, request: ContactStatusUpdate
    ):
        logger.info(
            f"API: Status update request: id={submission_id}, status={request.status.value}"
        )
        submission = await contact_service.update_status(submission_id, request.status)
        if submission is None:
            logger.warning(f"API: Contact submission not found: id={submission_id}")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Contact submission not found: {submission_id}",
            )
        return submission

    return router
