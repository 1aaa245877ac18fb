"""
FastAPI Dependencies
"""

from fastapi import Request

from services.hello_service.utils.world_client import WorldServiceClient


def get_world_client(request: Request) -> WorldServiceClient:
    """Dependency to get the shared world service client"""
    return request.app.state.world_client
