"""Hand replies back to the execution context that owns a document."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Protocol

from findkit.logging import logger


class OwningContext(Protocol):
    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        """Schedule ``callback(*args)`` on the owning context. Safe from any thread."""
        ...


class LoopContext:
    """Owning context backed by an asyncio event loop.

    Must be created on the loop that owns the document (or be handed that
    loop explicitly). Posting from a foreign thread goes through
    ``call_soon_threadsafe``; posting after the loop is closed drops the
    callback.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        if self._loop.is_closed():
            logger.warning(
                "owning_context_closed",
                callback=getattr(callback, "__qualname__", repr(callback)),
            )
            return
        self._loop.call_soon_threadsafe(callback, *args)


__all__ = ["OwningContext", "LoopContext"]
