"""Scheduling of exchange tasks on the running event loop."""

import asyncio
from collections.abc import Coroutine
from typing import Any

# Strong references to in-flight exchanges until they complete.
_background_tasks: set[asyncio.Task[None]] = set()


def spawn(coro: Coroutine[Any, Any, None]) -> None:
    """Schedule ``coro`` on the running loop without awaiting it."""
    task = asyncio.get_running_loop().create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
