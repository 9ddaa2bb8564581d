"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ponsectors.config import get_settings
from ponsectors.infrastructure.database import engine, Base
from ponsectors.core.logging import configure_logging
from ponsectors.core.middleware import setup_middleware
from ponsectors.core.exceptions import AppError, global_exception_handler

# Import all models so SQLAlchemy knows about them
from ponsectors.domain.models.user import UserModel  # noqa: F401
from ponsectors.domain.models.project import ProjectModel  # noqa: F401
from ponsectors.domain.models.insight import InsightModel  # noqa: F401
from ponsectors.domain.models.funding import FundingOpportunityModel  # noqa: F401
from ponsectors.domain.models.comment import CommentModel  # noqa: F401
from ponsectors.domain.models.notification import NotificationModel  # noqa: F401

# Import routers
from ponsectors.interfaces.api.auth import router as auth_router
from ponsectors.interfaces.api.users import router as users_router
from ponsectors.interfaces.api.projects import router as projects_router
from ponsectors.interfaces.api.insights import router as insights_router
from ponsectors.interfaces.api.funding import router as funding_router
from ponsectors.interfaces.api.comments import router as comments_router
from ponsectors.interfaces.api.admin import router as admin_router
from ponsectors.interfaces.api.notifications import router as notifications_router
from ponsectors.interfaces.api.feed import router as feed_router

from ponsectors.application.services.seed_service import ensure_default_admin, seed_demo_data
from ponsectors.interfaces.deps import store_scope

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Ponsectors backend...", env=settings.ENVIRONMENT, backend=settings.STORAGE_BACKEND)

    if settings.STORAGE_BACKEND == "sql":
        # Create DB tables (dev only, use migrations in production)
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created/verified")

    with store_scope() as store:
        ensure_default_admin(store)
        if settings.SEED_DEMO_DATA:
            seed_demo_data(store)

    yield

    logger.info("Ponsectors backend stopped")


app = FastAPI(
    title="Ponsectors — Collaboration Platform for Development Stakeholders",
    description="API Backend — projects, insights, funding opportunities and moderation",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Global Exception Handling
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# CORS is added last so it runs first on the request
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(projects_router)
app.include_router(insights_router)
app.include_router(funding_router)
app.include_router(comments_router)
app.include_router(admin_router)
app.include_router(notifications_router)
app.include_router(feed_router)


@app.get("/")
def root():
    return {
        "name": "Ponsectors",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
