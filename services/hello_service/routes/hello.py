"""
Hello routes
"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
import structlog

from shared.schemas.hello import ErrorResponse
from services.hello_service.utils.cancellation import run_while_connected
from services.hello_service.utils.config import RelayConfig, get_relay_config
from services.hello_service.utils.dependencies import get_world_client
from services.hello_service.utils.exceptions import ClientDisconnected
from services.hello_service.utils.world_client import WorldServiceClient

logger = structlog.get_logger(__name__)

router = APIRouter()

GREETING_PREFIX = "Hello "

# Non-standard status for a request whose caller went away
CLIENT_CLOSED_REQUEST = 499


def compose_greeting(payload: str) -> str:
    return GREETING_PREFIX + payload


@router.get(
    "/Hello",
    response_class=PlainTextResponse,
    responses={
        502: {"model": ErrorResponse, "description": "World service failed or unreachable"},
        504: {"model": ErrorResponse, "description": "World service timed out"},
    },
)
async def get_hello(
    request: Request,
    client: WorldServiceClient = Depends(get_world_client),
    config: RelayConfig = Depends(get_relay_config)
):
    """Greet the payload of the world service"""
    try:
        world = await run_while_connected(
            request, client.get_world(), config.disconnect_poll_interval
        )
    except ClientDisconnected:
        logger.info("Caller disconnected, world service call cancelled")
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    return PlainTextResponse(compose_greeting(world))
