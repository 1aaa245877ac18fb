"""
ASGI middleware shared by the FastAPI services
"""

from typing import Optional

import structlog
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class RequestLoggingMiddleware:
    """Log every HTTP request when received and when completed

    Written as plain ASGI so ``receive`` reaches the route untouched and
    handlers can still observe the caller disconnecting.
    """

    def __init__(self, app: ASGIApp, logger=None):
        self.app = app
        self.logger = logger or structlog.get_logger(__name__)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        self.logger.info(
            "Request received",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown"
        )

        status_code: Optional[int] = None

        async def send_with_status(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        await self.app(scope, receive, send_with_status)

        self.logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=status_code
        )
