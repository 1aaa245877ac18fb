"""
Failures raised while calling the world service
"""

from typing import Optional


class WorldServiceError(Exception):
    """Base class for world service failures"""

    error = "upstream_error"
    status_code = 502
    upstream_status: Optional[int] = None


class WorldServiceStatusError(WorldServiceError):
    """The world service answered with a non-success status"""

    def __init__(self, upstream_status: int, body: str = ""):
        super().__init__(f"World service returned HTTP {upstream_status}")
        self.upstream_status = upstream_status
        self.body = body
        # Client and server errors pass through, anything else is a bad gateway
        if 400 <= upstream_status <= 599:
            self.status_code = upstream_status


class WorldServiceTimeoutError(WorldServiceError):
    """The world service did not answer within the configured bound"""

    error = "upstream_timeout"
    status_code = 504


class WorldServiceUnavailableError(WorldServiceError):
    """The world service could not be reached"""

    error = "upstream_unavailable"
    status_code = 502


class ClientDisconnected(Exception):
    """The caller went away before the upstream answered"""
