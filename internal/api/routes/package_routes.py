"""
Travel Package API Routes.
Public listings plus admin CRUD. Deletion is a soft delete.
"""

from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException, status

from core.logger import logger
from internal.api.schemas import StandardResponse
from internal.api.utils import success_response
from repositories.models import Package, PackageCreate, PackageUpdate
from services.package_service import PackageService


def create_package_routes(
    package_service: PackageService, require_admin: Callable
) -> APIRouter:
    """
    Factory function to create package routes with dependency injection.

    Args:
        package_service: Service over the package repository
        require_admin: Dependency guarding admin endpoints

    Returns:
        APIRouter: Configured router with public and admin package endpoints
    """
    router = APIRouter(tags=["Packages"])
    admin = [Depends(require_admin)]

    def _not_found(package_id: str) -> HTTPException:
        logger.warning(f"API: Package not found: id={package_id}")
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Package not found: {package_id}",
        )

    @router.get(
        "/api/packages",
        response_model=List[Package],
        summary="List Packages",
        description="All active travel packages",
    )
    async def list_packages():
        return await package_service.list_packages()

    @router.get(
        "/api/packages/featured",
        response_model=List[Package],
        summary="List Featured Packages",
    )
    async def list_featured_packages():
        return await package_service.list_featured()

    @router.get(
        "/api/packages/{package_id}",
        response_model=Package,
        summary="Get Package",
        responses={404: {"description": "Package not found or inactive"}},
    )
    async def get_package(package_id: str):
        package = await package_service.get_active_package(package_id)
        if package is None:
            raise _not_found(package_id)
        return package

    @router.get(
        "/api/destinations/{destination_id}/packages",
        response_model=List[Package],
        summary="List Packages For Destination",
    )
    async def list_destination_packages(destination_id: str):
        return await package_service.list_for_destination(destination_id)

    @router.get(
        "/api/admin/packages",
        response_model=List[Package],
        summary="Admin: List Packages",
        dependencies=admin,
    )
    async def admin_list_packages():
        return await package_service.list_packages()

    @router.get(
        "/api/admin/packages/{package_id}",
        response_model=Package,
        summary="Admin: Get Package",
        description="Get a package by ID, including deactivated ones",
        responses={404: {"description": "Package not found"}},
        dependencies=admin,
    )
    async def admin_get_package(package_id: str):
        package = await package_service.get_package(package_id)
        if package is None:
            raise _not_found(package_id)
        return package

    @router.post(
        "/api/admin/packages",
        response_model=Package,
        status_code=status.HTTP_201_CREATED,
        summary="Admin: Create Package",
        description="Create a package; destinationId is stored as given",
        dependencies=admin,
    )
    async def create_package(request: PackageCreate):
        try:
            logger.info(f"API: Create package request: name={request.name}")
            return await package_service.create_package(request)
        except Exception as e:
            logger.error(f"API: Failed to create package: {e}")
            logger.exception("Create package error details:")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to create package: {str(e)}",
            )

    @router.put(
        "/api/admin/packages/{package_id}",
        response_model=Package,
        summary="Admin: Update Package",
        description="Partially update a package; omitted or null fields are kept",
        responses={404: {"description": "Package not found"}},
        dependencies=admin,
    )
    async def update_package(package_id: str, request: PackageUpdate):
        try:
            logger.info(f"API: Update package request: id={package_id}")
            package = await package_service.update_package(package_id, request)
            if package is None:
                raise _not_found(package_id)
            return package

        except HTTPException:
            raise

        except Exception as e:
            logger.error(f"API: Failed to update package {package_id}: {e}")
            logger.exception("Update package error details:")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to update package: {str(e)}",
            )

    @router.delete(
        "/api/admin/packages/{package_id}",
        response_model=StandardResponse,
        summary="Admin: Delete Package",
        description="Deactivate a package; it stays retrievable by ID",
        responses={404: {"description": "Package not found"}},
        dependencies=admin,
    )
    async def delete_package(package_id: str):
        logger.info(f"API: Delete package request: id={package_id}")
        if not await package_service.delete_package(package_id):
            raise _not_found(package_id)
        return success_response(message="Package deleted", data={"id": package_id})

    return router
