"""
API Routes.
"""

from .auth_routes import create_auth_routes
from .contact_routes import create_contact_routes
from .content_routes import create_content_routes
from .destination_routes import create_destination_routes
from .gallery_routes import create_gallery_routes
from .health_routes import create_health_routes
from .newsletter_routes import create_newsletter_routes
from .package_routes import create_package_routes
from .stats_routes import create_stats_routes

__all__ = [
    "create_auth_routes",
    "create_contact_routes",
    "create_content_routes",
    "create_destination_routes",
    "create_gallery_routes",
    "create_health_routes",
    "create_newsletter_routes",
    "create_package_routes",
    "create_stats_routes",
]
