"""
World routes
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
import structlog

from services.world_service.utils.config import WorldConfig, get_world_config

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/World", response_class=PlainTextResponse)
async def get_world(config: WorldConfig = Depends(get_world_config)):
    """Return the world payload as plain text"""
    logger.debug("Serving world payload", payload_length=len(config.world_payload))
    return PlainTextResponse(config.world_payload)
