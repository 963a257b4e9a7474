"""Single-slot debounce timer built on the running event loop."""

from __future__ import annotations

import asyncio
from typing import Any, Callable


class Debouncer:
    """Holds at most one scheduled callback.

    Scheduling a new callback cancels the previous one before the new timer is
    armed, so only the callback scheduled last can ever fire.
    """

    def __init__(self, delay: float = 0.3) -> None:
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None and not self._handle.cancelled()

    def remaining(self) -> float:
        if not self.pending:
            return 0.0
        loop = asyncio.get_running_loop()
        return max(0.0, self._handle.when() - loop.time())

    def schedule(self, callback: Callable[..., Any], *args: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, callback, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self._handle = None
        callback(*args)


__all__ = ["Debouncer"]
