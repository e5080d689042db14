"""
Site Content API Routes.
"""

from typing import Callable, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from core.logger import logger
from repositories.models import Content, ContentCreate
from services.content_service import ContentService


def create_content_routes(
    content_service: ContentService, require_admin: Callable
) -> APIRouter:
    """
    Factory function to create content routes with dependency injection.

    Args:
        content_service: Service over the content store
        require_admin: Dependency guarding write endpoints

    Returns:
        APIRouter: Configured router with content endpoints
    """
    router = APIRouter(tags=["Content"])

    @router.get(
        "/api/content",
        response_model=Dict[str, str],
        summary="Get Site Content",
        description="All editable site copy as a key/value map",
        responses={
            200: {
                "description": "Content map",
                "content": {
                    "application/json": {
                        "example": {
                            "hero.title": "Explore the World with TTRAVE",
                            "contact.phone": "+91 8100331032",
                        }
                    }
                },
            }
        },
    )
    async def get_content():
        return await content_service.get_content_map()

    @router.get(
        "/api/content/{key}",
        response_model=Content,
        summary="Get Content Entry",
        responses={404: {"description": "Content key not found"}},
    )
    async def get_content_entry(key: str):
        content = await content_service.get_content(key)
        if content is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Content not found: {key}",
            )
        return content

    @router.put(
        "/api/admin/content",
        response_model=List[Content],
        summary="Update Site Content",
        description="Upsert a list of key/value pairs",
        dependencies=[Depends(require_admin)],
    )
    @router.put(
        "/api/content",
        response_model=List[Content],
        summary="Update Site Content",
        description="Upsert a list of key/value pairs",
        include_in_schema=False,
        dependencies=[Depends(require_admin)],
    )
    async def update_content(updates: List[ContentCreate]):
        """
        Save edited site copy.

        Each item is created if its key is new, otherwise its value and
        updatedAt are replaced.
        """
        try:
            logger.info(f"API: Content update request: count={len(updates)}")
            return await content_service.set_many(updates)
        except Exception as e:
            logger.error(f"API: Content update failed: {e}")
            logger.exception("Content update error details:")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to update content: {str(e)}",
            )

    return router
