"""
API dependencies.
"""

from .auth import bearer_scheme, create_admin_dependency

__all__ = [
    "bearer_scheme",
    "create_admin_dependency",
]
