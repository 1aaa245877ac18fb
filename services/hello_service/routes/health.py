"""
Health check routes for hello service
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends
import structlog

from services.hello_service.utils.dependencies import get_world_client
from services.hello_service.utils.exceptions import WorldServiceError
from services.hello_service.utils.world_client import WorldServiceClient

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "service": "hello-service",
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": "1.0.0"
    }


@router.get("/health/detailed")
async def detailed_health_check(client: WorldServiceClient = Depends(get_world_client)):
    """Detailed health check including world service reachability"""
    health_data = {
        "service": "hello-service",
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": "1.0.0",
        "components": {}
    }

    try:
        upstream = await client.health()
        health_data["components"]["world_service"] = {
            "status": upstream.get("status", "unknown"),
            "url": client.base_url
        }
    except (WorldServiceError, ValueError) as e:
        logger.error("World service health check failed", error=str(e))
        health_data["components"]["world_service"] = {
            "status": "unhealthy",
            "url": client.base_url,
            "error": str(e)
        }
        health_data["status"] = "degraded"

    return health_data
