"""
World Service - Main Application
Answers the fixed world endpoint consumed by the hello service
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from shared.utils.logger import init_logging
from shared.utils.middleware import RequestLoggingMiddleware
from services.world_service.routes import world
from services.world_service.utils.config import get_world_config


init_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info("Starting World Service")
    get_world_config().log_config()

    yield

    logger.info("World Service shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="World Service",
    description="Upstream service answering the world endpoint",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


# Log all incoming requests
app.add_middleware(RequestLoggingMiddleware, logger=logger)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        method=request.method,
        url=str(request.url),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        }
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """Service health check"""
    return {
        "status": "healthy",
        "service": "world-service",
        "version": "1.0.0"
    }


# Register routes
app.include_router(world.router, prefix="/api", tags=["World"])


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "world-service",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "services.world_service.main:app",
        host="0.0.0.0",
        port=get_world_config().port,
        reload=True,
        log_level="info"
    )
