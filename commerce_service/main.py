"""Main FastAPI application"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from commerce_service.api.middleware import StructuredLoggingMiddleware
from commerce_service.api.v1.modules import API_MODULES, register_modules
from commerce_service.core.config import logger, settings
from commerce_service.infrastructure.persistence.database import (
    init_database,
    init_db,
    close_db,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Commerce Service...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Version: {settings.version}")

    try:
        init_database(settings.db_url)
        await init_db()
        logger.info("✓ Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        raise

    yield

    logger.info("Shutting down Commerce Service...")
    await close_db()


# Create FastAPI application
app = FastAPI(
    title="Commerce Service",
    description="Users and orders API",
    version=settings.version,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

app.add_middleware(StructuredLoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse(
        content={
            "status": "healthy",
            "version": settings.version,
            "environment": settings.environment,
        }
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return JSONResponse(
        content={
            "service": "Commerce Service",
            "version": settings.version,
            "modules": [module.name for module in API_MODULES],
            "docs": "/docs" if settings.is_development else None,
        }
    )


register_modules(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "commerce_service.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
