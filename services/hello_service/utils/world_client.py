"""
World Service Client
HTTP client for communication with world-service
"""

import asyncio
import os
from typing import Any, Dict, Optional

import httpx
import structlog

from services.hello_service.utils.config import RelayConfig
from services.hello_service.utils.exceptions import (
    WorldServiceStatusError,
    WorldServiceTimeoutError,
    WorldServiceUnavailableError,
)

logger = structlog.get_logger(__name__)

WORLD_ENDPOINT = "/api/World"
HEALTH_ENDPOINT = "/health"


class WorldServiceClient:
    """HTTP client for world service

    A single instance is created at startup and shared by all requests.
    Every call is bounded by ``deadline`` seconds in total on top of the
    per-phase httpx timeouts.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        connect_timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or os.getenv('WORLD_SERVICE_URL', 'http://localhost:5049')).rstrip('/')
        self.deadline = timeout
        self.timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport
        )

    @classmethod
    def from_config(cls, config: RelayConfig, **kwargs) -> "WorldServiceClient":
        """Build a client from the relay configuration"""
        return cls(
            base_url=config.world_service_url,
            timeout=config.world_service_timeout,
            connect_timeout=config.world_service_connect_timeout,
            **kwargs
        )

    async def _get(self, endpoint: str) -> httpx.Response:
        """Issue one GET against the world service"""
        try:
            response = await asyncio.wait_for(self._client.get(endpoint), timeout=self.deadline)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error("World service timed out", endpoint=endpoint, timeout=self.deadline)
            raise WorldServiceTimeoutError(
                f"World service did not answer within {self.deadline}s"
            ) from e
        except httpx.RequestError as e:
            logger.error("World service unreachable", endpoint=endpoint, error=str(e))
            raise WorldServiceUnavailableError(
                f"Failed to connect to world service: {e}"
            ) from e

        if not response.is_success:
            logger.warning(
                "World service returned error status",
                endpoint=endpoint,
                status_code=response.status_code
            )
            raise WorldServiceStatusError(response.status_code, response.text)

        return response

    async def get_world(self) -> str:
        """
        Fetch the world payload

        Returns:
            The response body decoded as text, possibly empty

        Raises:
            WorldServiceStatusError: non-success status from the world service
            WorldServiceTimeoutError: no answer within the deadline
            WorldServiceUnavailableError: transport failure
        """
        response = await self._get(WORLD_ENDPOINT)
        return response.text

    async def health(self) -> Dict[str, Any]:
        """Fetch the world service health document"""
        response = await self._get(HEALTH_ENDPOINT)
        return response.json()

    async def aclose(self) -> None:
        await self._client.aclose()
