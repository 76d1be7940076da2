"""
FastAPI Application
===================

Main FastAPI app setup with all routes and error handlers.
The DI container (and with it the MongoDB connection) is built when the
application starts, unless one is passed to create_application().
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from hrms import __version__
from hrms.api.error_handlers import register_error_handlers
from hrms.api.v1 import employee_router
from hrms.core.config import get_settings
from hrms.core.logging_config import setup_logging
from hrms.di.base_container import BaseContainer
from hrms.di.container import DIContainer
from hrms.infrastructure.db.mongo_connection import MongoConnectionManager

logger = logging.getLogger(__name__)

SERVICE_NAME = "HRMS Employee API"


@asynccontextmanager
async def lifespan(application: FastAPI):
    """
    Build the container on startup and close the connection on shutdown.
    
    DIContainer connects to MongoDB while registering its providers; a
    DatabaseConnectionError raised here aborts startup.
    """
    owns_container = getattr(application.state, "container", None) is None
    if owns_container:
        application.state.container = DIContainer(get_settings())
        logger.info("Dependency container initialized")
    
    try:
        yield
    finally:
        container = application.state.container
        if owns_container:
            if container.has(MongoConnectionManager):
                container.get(MongoConnectionManager).close()
            application.state.container = None
        logger.info("All services stopped")


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Logging configuration
    - Error handlers
    - API route registration
    - Lifespan handler that owns the database connection
    
    Args:
        container: Pre-built container (tests pass one wired to an
            in-memory repository). When omitted, one is built on startup.
    
    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title=SERVICE_NAME,
        description="CRUD API over the employees collection",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container
    
    register_error_handlers(application)
    application.include_router(employee_router, prefix="/employee")
    
    @application.get("/")
    async def root():
        """Root endpoint - service information."""
        return {
            "status": "running",
            "service": SERVICE_NAME,
            "version": __version__,
            "docs": "/docs"
        }
    
    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}
    
    return application


# Create application instance
app = create_application()
