"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from wedding_api.application.services.auth_service import CredentialStore, build_password_context
from wedding_api.application.services.token_service import TokenIssuer, TokenVerifier
from wedding_api.config import Settings, get_settings
from wedding_api.core.exceptions import (
    AppError,
    app_error_handler,
    global_exception_handler,
    validation_exception_handler,
)
from wedding_api.core.logging import configure_logging
from wedding_api.core.middleware import setup_middleware
from wedding_api.domain.models.user import User
from wedding_api.infrastructure.database import Database
from wedding_api.infrastructure.identity.google import GoogleAssertionVerifier
from wedding_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from wedding_api.interfaces.api.auth import router as auth_router
from wedding_api.interfaces.api.bookings import router as bookings_router
from wedding_api.interfaces.api.vendors import router as vendors_router
from wedding_api.interfaces.api.weddings import router as weddings_router

logger = structlog.get_logger(__name__)


def _ensure_admin(app: FastAPI) -> None:
    """Create the bootstrap admin user if configured and missing."""
    settings: Settings = app.state.settings
    if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
        return

    db = app.state.database.session()
    try:
        store = CredentialStore(SQLAlchemyUserRepository(db, User), app.state.pwd_context)
        if store.repo.get_by_email(settings.ADMIN_EMAIL) is None:
            store.register(
                name="Admin",
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD,
                role="admin",
            )
            logger.info("Default admin user created")
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    settings: Settings = app.state.settings
    logger.info("Starting Wedding API", env=settings.ENVIRONMENT)

    # Create DB tables (dev only — use migrations in production)
    app.state.database.create_all()
    logger.info("Database tables created/verified")
    _ensure_admin(app)

    yield

    app.state.database.dispose()
    logger.info("Wedding API stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Wedding Vendor Booking API",
        description="Accounts, vendors, weddings and bookings",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = Database(settings.DATABASE_URL)
    app.state.pwd_context = build_password_context(settings)
    app.state.token_issuer = TokenIssuer.from_settings(settings)
    app.state.token_verifier = TokenVerifier.from_settings(settings)
    app.state.assertion_verifier = GoogleAssertionVerifier(settings.GOOGLE_CLIENT_ID)

    setup_middleware(app, settings)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(auth_router)
    app.include_router(vendors_router)
    app.include_router(weddings_router)
    app.include_router(bookings_router)

    @app.get("/")
    def root():
        return {
            "name": "Wedding Vendor Booking API",
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
