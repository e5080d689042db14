"""
Internal package.
Contains the HTTP API: app factory, routes, schemas and dependencies.
"""

from . import api

__all__ = [
    "api",
]
