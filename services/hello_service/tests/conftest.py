"""
Pytest fixtures for hello service tests
"""

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from services.hello_service.main import app
from services.hello_service.utils.dependencies import get_world_client
from services.hello_service.utils.world_client import WorldServiceClient

WORLD_URL = "http://world-service:5049"


def _world_replies(status_code: int = 200, text: str = "Hark") -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)
    return handler


@pytest.fixture
def world_replies():
    """Handler factory answering every world service request the same way"""
    return _world_replies


@pytest.fixture
def make_world_client():
    """Build a world service client backed by a mock transport"""
    def _make(handler, timeout: float = 5.0, connect_timeout: float = 2.0) -> WorldServiceClient:
        return WorldServiceClient(
            base_url=WORLD_URL,
            timeout=timeout,
            connect_timeout=connect_timeout,
            transport=httpx.MockTransport(handler)
        )
    return _make


@pytest.fixture
def relay(make_world_client):
    """Create a test client whose upstream answers through ``handler``"""
    def _make(handler=None, **kwargs) -> TestClient:
        world_client = make_world_client(handler or _world_replies(), **kwargs)
        app.dependency_overrides[get_world_client] = lambda: world_client
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
