"""Node-style ``callback(error, result)`` adapter for the async client."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

Callback = Callable[[Optional[BaseException], Any], None]


def with_callback(awaitable: Awaitable[Any], callback: Callback) -> "asyncio.Task[Any]":
    """Schedule ``awaitable`` on the running loop and report to ``callback``.

    Must be called from inside a running event loop. The returned task can be
    awaited or cancelled; a cancelled task never invokes the callback.
    """
    task = asyncio.ensure_future(awaitable)

    def _done(finished: "asyncio.Future[Any]") -> None:
        if finished.cancelled():
            return
        error = finished.exception()
        if error is not None:
            callback(error, None)
        else:
            callback(None, finished.result())

    task.add_done_callback(_done)
    return task


__all__ = ["Callback", "with_callback"]
