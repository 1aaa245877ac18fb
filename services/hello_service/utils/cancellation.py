"""
Tie an outbound call to the lifetime of the inbound request
"""

import asyncio
from typing import Awaitable, Protocol, TypeVar

from services.hello_service.utils.exceptions import ClientDisconnected

T = TypeVar("T")


class SupportsDisconnect(Protocol):
    async def is_disconnected(self) -> bool: ...


async def run_while_connected(
    request: SupportsDisconnect,
    awaitable: Awaitable[T],
    poll_interval: float = 0.1
) -> T:
    """
    Await ``awaitable`` while the caller of ``request`` is still connected

    The pending call is cancelled as soon as the caller disconnects, or when
    this coroutine is itself cancelled.

    Raises:
        ClientDisconnected: the caller went away first
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()
            await asyncio.wait({task})
