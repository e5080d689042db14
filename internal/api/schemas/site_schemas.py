"""
Request/response schemas for content, contact, newsletter and dashboard endpoints.
Entity bodies reuse the repository models directly.
"""

from pydantic import Field

from repositories.models import CamelModel, ContactStatus


class ContactStatusUpdate(CamelModel):
    status: ContactStatus = Field(..., description="pending or responded")


class NewsletterRequest(CamelModel):
    email: str = Field(..., min_length=3, description="Subscriber email")


class StatsResponse(CamelModel):
    """Counters shown on the admin dashboard overview."""

    contact_forms: int
    newsletter: int
    this_month: int
    growth: int
