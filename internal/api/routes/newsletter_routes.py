"""
Newsletter API Routes.
"""

from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException, status

from core.logger import logger
from internal.api.schemas import NewsletterRequest
from repositories.models import NewsletterSubscription
from services.newsletter_service import NewsletterService


def create_newsletter_routes(
    newsletter_service: NewsletterService, require_admin: Callable
) -> APIRouter:
    """
    Factory function to create newsletter routes.

    Args:
        newsletter_service: Service over newsletter subscriptions
        require_admin: Dependency guarding admin endpoints

    Returns:
        APIRouter: Router with subscribe/unsubscribe and admin listing
    """
    router = APIRouter(tags=["Newsletter"])

    @router.post(
        "/api/newsletter/subscribe",
        response_model=NewsletterSubscription,
        summary="Subscribe To Newsletter",
        description="Subscribe an email; repeat and lapsed subscriptions reuse one record",
    )
    async def subscribe(request: NewsletterRequest):
        logger.info("API: Newsletter subscribe request")
        return await newsletter_service.subscribe(request.email)

    @router.post(
        "/api/newsletter/unsubscribe",
        response_model=NewsletterSubscription,
        summary="Unsubscribe From Newsletter",
        responses={404: {"description": "Email is not subscribed"}},
    )
    async def unsubscribe(request: NewsletterRequest):
        subscription = await newsletter_service.unsubscribe(request.email)
        if subscription is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Subscription not found",
            )
        return subscription

    @router.get(
        "/api/admin/newsletter-subscriptions",
        response_model=List[NewsletterSubscription],
        summary="Admin: List Newsletter Subscriptions",
        description="Active subscriptions only",
        dependencies=[Depends(require_admin)],
    )
    async def list_subscriptions():
        return await newsletter_service.list_subscriptions()

    return router
