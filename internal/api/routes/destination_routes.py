"""
Destination API Routes.
Public listings plus admin CRUD. Deletion is a soft delete.
"""

from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException, status

from core.logger import logger
from internal.api.schemas import StandardResponse
from internal.api.utils import success_response
from repositories.models import (
    Destination,
    DestinationCreate,
    DestinationType,
    DestinationUpdate,
)
from services.destination_service import DestinationService


def create_destination_routes(
    destination_service: DestinationService, require_admin: Callable
) -> APIRouter:
    """
    Factory function to create destination routes with dependency injection.

    Args:
        destination_service: Service over the destination repository
        require_admin: Dependency guarding admin endpoints

    Returns:
        APIRouter: Configured router with public and admin destination endpoints
    """
    router = APIRouter(tags=["Destinations"])
    admin = [Depends(require_admin)]

    def _not_found(destination_id: str) -> HTTPException:
        logger.warning(f"API: Destination not found: id={destination_id}")
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Destination not found: {destination_id}",
        )

    @router.get(
        "/api/destinations",
        response_model=List[Destination],
        summary="List Destinations",
        description="All active destinations",
    )
    async def list_destinations():
        return await destination_service.list_destinations()

    @router.get(
        "/api/destinations/{destination_type}",
        response_model=List[Destination],
        summary="List Destinations By Type",
        description="Active destinations of type domestic or international",
        responses={422: {"description": "Unknown destination type"}},
    )
    async def list_destinations_by_type(destination_type: DestinationType):
        return await destination_service.list_by_type(destination_type)

    @router.get(
        "/api/admin/destinations",
        response_model=List[Destination],
        summary="Admin: List Destinations",
        dependencies=admin,
    )
    async def admin_list_destinations():
        return await destination_service.list_destinations()

    @router.get(
        "/api/admin/destinations/{destination_id}",
        response_model=Destination,
        summary="Admin: Get Destination",
        description="Get a destination by ID, including deactivated ones",
        responses={404: {"description": "Destination not found"}},
        dependencies=admin,
    )
    async def admin_get_destination(destination_id: str):
        destination = await destination_service.get_destination(destination_id)
        if destination is None:
            raise _not_found(destination_id)
        return destination

    @router.post(
        "/api/admin/destinations",
        response_model=Destination,
        status_code=status.HTTP_201_CREATED,
        summary="Admin: Create Destination",
        description="Create a destination; icon and isActive fall back to defaults",
        responses={
            201: {
                "description": "Destination created",
                "content": {
                    "application/json": {
                        "example": {
                            "id": "2f1c5e0e-6b0a-4c43-9a4e-0d9f3f1f6a11",
                            "name": "Nepal",
                            "type": "international",
                            "imageUrl": "https://images.unsplash.com/photo.jpg",
                            "formUrl": "https://forms.gle/placeholder-nepal",
                            "icon": "bi-geo-alt-fill",
                            "isActive": True,
                            "createdAt": "2024-11-02T16:00:00Z",
                        }
                    }
                },
            },
            422: {"description": "Validation error"},
        },
        dependencies=admin,
    )
    async def create_destination(request: DestinationCreate):
        try:
            logger.info(f"API: Create destination request: name={request.name}")
            return await destination_service.create_destination(request)
        except Exception as e:
            logger.error(f"API: Failed to create destination: {e}")
            logger.exception("Create destination error details:")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to create destination: {str(e)}",
            )

    @router.put(
        "/api/admin/destinations/{destination_id}",
        response_model=Destination,
        summary="Admin: Update Destination",
        description="Partially update a destination; omitted or null fields are kept",
        responses={404: {"description": "Destination not found"}},
        dependencies=admin,
    )
    async def update_destination(destination_id: str, request: DestinationUpdate):
        try:
            logger.info(f"API: Update destination request: id={destination_id}")
            destination = await destination_service.update_destination(
                destination_id, request
            )
            if destination is None:
                raise _not_found(destination_id)
            return destination

        except HTTPException:
            raise

        except Exception as e:
            logger.error(f"API: Failed to update destination {destination_id}: {e}")
            logger.exception("Update destination error details:")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to update destination: {str(e)}",
            )

    @router.delete(
        "/api/admin/destinations/{destination_id}",
        response_model=StandardResponse,
        summary="Admin: Delete Destination",
        description="Deactivate a destination; it stays retrievable by ID",
        responses={404: {"description": "Destination not found"}},
        dependencies=admin,
    )
    async def delete_destination(destination_id: str):
        logger.info(f"API: Delete destination request: id={destination_id}")
        if not await destination_service.delete_destination(destination_id):
            raise _not_found(destination_id)
        return success_response(
            message="Destination deleted", data={"id": destination_id}
        )

    return router
