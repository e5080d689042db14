"""
Health Check API Routes.
"""

from fastapi import APIRouter

from core.config import Settings
from internal.api.schemas import HealthResponse, StandardResponse
from internal.api.utils import success_response


def create_health_routes(settings: Settings) -> APIRouter:
    """
    Factory function to create health routes.

    Args:
        settings: Application settings

    Returns:
        APIRouter: Configured router with health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/",
        response_model=StandardResponse,
        summary="Root Endpoint",
        description="Get basic API information",
        operation_id="get_root",
        responses={
            200: {
                "description": "API information",
                "content": {
                    "application/json": {
                        "example": {
                            "error_code": 0,
                            "message": "API service is running",
                            "data": {
                                "service": "TTravel Hospitality API",
                                "version": "1.0.0",
                                "status": "running",
                            },
                        }
                    }
                },
            }
        },
    )
    async def root():
        """
        Root endpoint.

        Returns basic information about the API service including
        service name, version, and current status.
        """
        return success_response(
            message="API service is running",
            data={
                "service": settings.app_name,
                "version": settings.app_version,
                "status": "running",
            },
        )

    @router.get(
        "/health",
        response_model=StandardResponse,
        summary="Health Check",
        description="Check service health",
        operation_id="health_check",
    )
    async def health_check():
        """
        Health check endpoint.

        **Returns:**
        Health status object with service name, version and storage backend.
        """
        health_data = HealthResponse(
            status="healthy",
            service=settings.app_name,
            version=settings.app_version,
            environment=settings.environment,
            storage="in-memory",
        )
        return success_response(message="Service is healthy", data=health_data.model_dump())

    return router
