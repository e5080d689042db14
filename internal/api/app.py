"""
FastAPI application factory for the TTravel Hospitality site API.
Implements clean separation of concerns with logging and error handling:
- Routes are separated into modules built by factory functions
- A single in-memory store is created per application and injected downward
- Services sit between routes and repositories
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, get_settings
from core.logger import logger
from core.security import hash_password
from internal.api.dependencies import create_admin_dependency
from internal.api.routes import (
    create_auth_routes,
    create_contact_routes,
    create_content_routes,
    create_destination_routes,
    create_gallery_routes,
    create_health_routes,
    create_newsletter_routes,
    create_package_routes,
    create_stats_routes,
)
from repositories import MemStorage
from services import (
    AuthService,
    ContactService,
    ContentService,
    DestinationService,
    GalleryService,
    NewsletterService,
    PackageService,
    StatsService,
)


def create_storage(settings: Settings) -> MemStorage:
    """
    Build the in-memory store, seeding the admin account and default data.

    Args:
        settings: Application settings

    Returns:
        MemStorage: Fresh store instance
    """
    logger.info("Initializing in-memory storage...")
    password_hash = hash_password(settings.admin_password, rounds=settings.bcrypt_rounds)
    return MemStorage(
        admin_username=settings.admin_username,
        admin_password_hash=password_hash,
        seed=settings.seed_default_data,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown logging.
    The store lives on app.state and is dropped with the process.
    """
    settings: Settings = app.state.settings
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API: {settings.api_host}:{settings.api_port}")

    yield

    logger.info("========== API service stopped; in-memory data discarded ==========")


def create_app(
    settings: Optional[Settings] = None, storage: Optional[MemStorage] = None
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        settings: Settings to use, defaults to the cached environment settings
        storage: Store to serve from, a seeded MemStorage is created when omitted

    Returns:
        FastAPI: Configured application instance
    """
    try:
        logger.info("Creating FastAPI application...")
        settings = settings or get_settings()
        if storage is None:
            storage = create_storage(settings)

        description = """
## TTravel Hospitality API

Back end for the travel agency marketing site and its admin dashboard.

### Public

* **Content** - Editable site copy for the About and Contact pages
* **Destinations** - Domestic and international destination catalogue
* **Packages** - Travel packages, featured packages
* **Contact** - Contact form submissions
* **Newsletter** - Subscribe and unsubscribe
* **Gallery** - Photo gallery images

### Admin

Log in via `/api/auth/login` and send the returned token as
`Authorization: Bearer <token>` to the `/api/admin/*` endpoints.

Data is held in memory and reset on restart.
        """

        tags_metadata = [
            {"name": "Content", "description": "Editable site copy as key/value pairs."},
            {"name": "Destinations", "description": "Destination catalogue. Deletes are soft."},
            {"name": "Packages", "description": "Travel packages. Deletes are soft."},
            {"name": "Contact", "description": "Contact form submissions."},
            {"name": "Newsletter", "description": "Newsletter subscriptions."},
            {"name": "Gallery", "description": "Photo gallery images."},
            {"name": "Auth", "description": "Admin login and logout."},
            {"name": "Admin", "description": "Dashboard statistics."},
            {"name": "Health", "description": "Health check endpoints."},
        ]

        app = FastAPI(
            title=settings.app_name,
            version=settings.app_version,
            description=description,
            lifespan=lifespan,
            openapi_tags=tags_metadata,
            docs_url="/docs",
            redoc_url="/redoc",
            openapi_url="/openapi.json",
        )
        app.state.settings = settings
        app.state.storage = storage

        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.debug("CORS middleware added")

        # Services share the one store instance
        auth_service = AuthService(storage.users, settings)
        require_admin = create_admin_dependency(auth_service)
        app.state.auth_service = auth_service

        app.include_router(create_health_routes(settings))
        app.include_router(create_auth_routes(auth_service, require_admin))
        app.include_router(
            create_content_routes(ContentService(storage.content), require_admin)
        )
        app.include_router(
            create_destination_routes(
                DestinationService(storage.destinations), require_admin
            )
        )
        app.include_router(
            create_package_routes(PackageService(storage.packages), require_admin)
        )
        app.include_router(
            create_contact_routes(
                ContactService(storage.contact_submissions), require_admin
            )
        )
        app.include_router(
            create_newsletter_routes(
                NewsletterService(storage.newsletter_subscriptions), require_admin
            )
        )
        app.include_router(
            create_gallery_routes(GalleryService(storage.gallery), require_admin)
        )
        app.include_router(
            create_stats_routes(
                StatsService(storage.contact_submissions, storage.newsletter_subscriptions),
                require_admin,
            )
        )
        logger.info("✅ API routes registered")

        logger.info("FastAPI application created successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI application: {e}")
        logger.exception("Application creation error details:")
        raise

