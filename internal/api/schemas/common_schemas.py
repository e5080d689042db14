"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel
from typing import Optional, Any


class StandardResponse(BaseModel):
    """
    Standard API response format for acknowledgements.

    - error_code: 0 = success, 1 = error
    - message: Success or error message
    - data: Response data (optional)
    """

    error_code: int = 0
    message: str
    data: Optional[Any] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error_code": 0,
                    "message": "Destination deleted",
                    "data": {"id": "2f1c5e0e-6b0a-4c43-9a4e-0d9f3f1f6a11"},
                },
                {"error_code": 1, "message": "Destination not found", "data": None},
            ]
        }
    }


class HealthResponse(BaseModel):
    """Response model for health check (internal use)."""

    status: str
    service: str
    version: str
    environment: str
    storage: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "service": "TTravel Hospitality API",
                    "version": "1.0.0",
                    "environment": "development",
                    "storage": "in-memory",
                }
            ]
        }
    }
