"""
Hello Service Client
HTTP client for communication with hello-service
"""

import logging
from typing import Optional

import httpx

from services.frontend_service.config import FrontendConfig

logger = logging.getLogger(__name__)

HELLO_ENDPOINT = "/api/Hello"


class HelloServiceClient:
    """HTTP client for hello service"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = httpx.Timeout(timeout)
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport
        )

    @classmethod
    def from_config(cls, config: FrontendConfig, **kwargs) -> "HelloServiceClient":
        return cls(
            base_url=config.hello_service_url,
            timeout=config.hello_service_timeout,
            **kwargs
        )

    def fetch_hello(self) -> str:
        """
        Fetch the greeting from the hello service

        Returns:
            Response body as text

        Raises:
            httpx.HTTPStatusError: non-success status from the hello service
            httpx.RequestError: hello service unreachable or timed out
        """
        response = self._client.get(HELLO_ENDPOINT)
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        self._client.close()
