"""
Admin Dashboard Statistics Routes.
"""

from typing import Callable

from fastapi import APIRouter, Depends

from internal.api.schemas import StatsResponse
from services.stats_service import StatsService


def create_stats_routes(stats_service: StatsService, require_admin: Callable) -> APIRouter:
    router = APIRouter(tags=["Admin"])

    @router.get(
        "/api/admin/stats",
        response_model=StatsResponse,
        summary="Admin: Dashboard Stats",
        description="Contact form, newsletter and month-over-month counters",
        responses={
            200: {
                "description": "Dashboard counters",
                "content": {
                    "application/json": {
                        "example": {
                            "contactForms": 42,
                            "newsletter": 17,
                            "thisMonth": 6,
                            "growth": 20,
                        }
                    }
                },
            }
        },
        dependencies=[Depends(require_admin)],
    )
    async def get_stats():
        return await stats_service.get_stats()

    return router
