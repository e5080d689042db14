"""
Gallery API Routes.
"""

from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException, status

from core.logger import logger
from internal.api.schemas import StandardResponse
from internal.api.utils import success_response
from repositories.models import GalleryImage, GalleryImageCreate
from services.gallery_service import GalleryService


def create_gallery_routes(
    gallery_service: GalleryService, require_admin: Callable
) -> APIRouter:
    """
    Factory function to create gallery routes.

    Args:
        gallery_service: Service over gallery images
        require_admin: Dependency guarding write endpoints

    Returns:
        APIRouter: Router with gallery endpoints
    """
    router = APIRouter(tags=["Gallery"])
    admin = [Depends(require_admin)]

    @router.get(
        "/api/gallery",
        response_model=List[GalleryImage],
        summary="List Gallery Images",
    )
    async def list_gallery_images():
        return await gallery_service.list_images()

    @router.post(
        "/api/gallery",
        response_model=GalleryImage,
        status_code=status.HTTP_201_CREATED,
        summary="Admin: Add Gallery Image",
        dependencies=admin,
    )
    async def add_gallery_image(request: GalleryImageCreate):
        logger.info(f"API: Add gallery image request: url={request.image_url}")
        return await gallery_service.add_image(request)

    @router.delete(
        "/api/admin/gallery/{image_id}",
        response_model=StandardResponse,
        summary="Admin: Remove Gallery Image",
        responses={404: {"description": "Image not found"}},
        dependencies=admin,
    )
    async def remove_gallery_image(image_id: str):
        if not await gallery_service.remove_image(image_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Gallery image not found: {image_id}",
            )
        return success_response(message="Gallery image removed", data={"id": image_id})

    return router
