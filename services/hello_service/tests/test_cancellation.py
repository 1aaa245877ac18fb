"""
Tests for cancelling the upstream call when the caller goes away
"""

import asyncio
import time

import httpx
import pytest

from services.hello_service.main import app
from services.hello_service.routes.hello import CLIENT_CLOSED_REQUEST
from services.hello_service.utils.cancellation import run_while_connected
from services.hello_service.utils.dependencies import get_world_client
from services.hello_service.utils.exceptions import ClientDisconnected


class FakeRequest:
    """Request stand-in whose caller disconnects after ``connected_polls`` checks"""

    def __init__(self, connected_polls: int = 0):
        self.connected_polls = connected_polls
        self.polls = 0

    async def is_disconnected(self) -> bool:
        self.polls += 1
        return self.polls > self.connected_polls


async def test_returns_result_of_fast_call():
    async def fast():
        return "Hark"

    result = await run_while_connected(FakeRequest(connected_polls=100), fast(), poll_interval=0.01)

    assert result == "Hark"


async def test_propagates_errors_of_the_call():
    async def broken():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await run_while_connected(FakeRequest(connected_polls=100), broken(), poll_interval=0.01)


async def test_disconnect_cancels_pending_call():
    cancelled = asyncio.Event()

    async def slow():
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    request = FakeRequest(connected_polls=2)

    with pytest.raises(ClientDisconnected):
        await run_while_connected(request, slow(), poll_interval=0.01)

    assert cancelled.is_set()
    assert request.polls == 3


async def test_outer_cancellation_cancels_pending_call():
    cancelled = asyncio.Event()

    async def slow():
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    outer = asyncio.ensure_future(
        run_while_connected(FakeRequest(connected_polls=1000), slow(), poll_interval=0.01)
    )
    await asyncio.sleep(0.05)
    outer.cancel()

    with pytest.raises(asyncio.CancelledError):
        await outer

    assert cancelled.is_set()


def asgi_get(path: str) -> dict:
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"testserver")],
        "client": ("testclient", 50000),
        "server": ("testserver", 80),
        "state": {},
    }


async def call_hello_app(disconnect_after: float) -> list:
    """Run GET /api/Hello through the whole application; the caller leaves after ``disconnect_after`` seconds"""
    sent = []
    started = time.monotonic()
    request_delivered = False

    async def receive():
        nonlocal request_delivered
        if not request_delivered:
            request_delivered = True
            return {"type": "http.request", "body": b"", "more_body": False}
        remaining = disconnect_after - (time.monotonic() - started)
        if remaining > 0:
            await asyncio.sleep(remaining)
        return {"type": "http.disconnect"}

    async def send(message):
        sent.append(message)

    await app(asgi_get("/api/Hello"), receive, send)
    return sent


@pytest.fixture
def hello_app_with_upstream(make_world_client):
    def _install(handler, **kwargs):
        world_client = make_world_client(handler, **kwargs)
        app.dependency_overrides[get_world_client] = lambda: world_client

    yield _install
    app.dependency_overrides.clear()


async def test_app_cancels_upstream_when_caller_disconnects(hello_app_with_upstream):
    upstream_cancelled = asyncio.Event()

    async def handler(request):
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            upstream_cancelled.set()
            raise
        return httpx.Response(200, text="Hark")

    hello_app_with_upstream(handler, timeout=30)

    started = time.monotonic()
    sent = await call_hello_app(disconnect_after=0.2)
    elapsed = time.monotonic() - started

    assert upstream_cancelled.is_set()
    assert elapsed < 2
    assert sent[0]["type"] == "http.response.start"
    assert sent[0]["status"] == CLIENT_CLOSED_REQUEST
    assert not any(b"Hello" in message.get("body", b"") for message in sent)


async def test_app_answers_caller_that_stays(hello_app_with_upstream):
    hello_app_with_upstream(lambda request: httpx.Response(200, text="Hark"))

    sent = await call_hello_app(disconnect_after=5)

    assert sent[0]["status"] == 200
    assert b"".join(message.get("body", b"") for message in sent[1:]) == b"Hello Hark"
