"""Timer scheduling — the only source of asynchronous re-entry into playback."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Callable


class TimerHandle(ABC):
    """A pending one-shot callback."""

    @abstractmethod
    def cancel(self) -> None: ...


class Scheduler(ABC):
    """Abstract one-shot timer source, injected into the playback controller."""

    @abstractmethod
    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Run *callback* once after *delay_ms* milliseconds."""
        ...


class _LoopTimerHandle(TimerHandle):
    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()


class AsyncioScheduler(Scheduler):
    """Concrete scheduler backed by an asyncio event loop.

    With no explicit loop, the running loop at call time is used, so the
    scheduler must be driven from inside a coroutine.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _LoopTimerHandle(loop.call_later(delay_ms / 1000.0, callback))
