"""
Hello Service - Main Application
Relays each hello request to the world service and returns the greeting
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from shared.schemas.hello import ErrorResponse
from shared.utils.logger import init_logging
from shared.utils.middleware import RequestLoggingMiddleware
from services.hello_service.routes import health, hello
from services.hello_service.utils.config import get_relay_config
from services.hello_service.utils.exceptions import WorldServiceError
from services.hello_service.utils.world_client import WorldServiceClient


init_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info("Starting Hello Service")

    config = get_relay_config()
    config.log_config()
    app.state.world_client = WorldServiceClient.from_config(config)
    logger.info("World service client initialized", url=config.world_service_url)

    yield

    await app.state.world_client.aclose()
    logger.info("World service client closed")

    logger.info("Hello Service shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Hello Service",
    description="Relays hello requests to the world service",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure CORS for the frontend origin only
app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_relay_config().cors_allowed_origin],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Log all incoming requests
app.add_middleware(RequestLoggingMiddleware, logger=logger)


@app.exception_handler(WorldServiceError)
async def world_service_exception_handler(request: Request, exc: WorldServiceError):
    """Translate world service failures into error responses"""
    logger.warning(
        "World service call failed",
        error=exc.error,
        status_code=exc.status_code,
        upstream_status=exc.upstream_status,
        url=str(request.url)
    )

    body = ErrorResponse(
        error=exc.error,
        message=str(exc),
        upstream_status=exc.upstream_status
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


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


# Register routes
app.include_router(health.router, tags=["Health"])
app.include_router(hello.router, prefix="/api", tags=["Hello"])


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "hello-service",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "services.hello_service.main:app",
        host="0.0.0.0",
        port=get_relay_config().port,
        reload=True,
        log_level="info"
    )
