"""
Delayed Callbacks
Cancellable one-shot timers for the wizard auto-reset.
"""

import asyncio
import threading
from abc import ABC, abstractmethod
from typing import Callable, Protocol


class ScheduledCall(Protocol):
    """Handle for a pending callback."""

    def cancel(self) -> None:
        ...


class Scheduler(ABC):
    """Runs a callback once after a delay."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """
        Schedule a callback.

        Args:
            delay: Seconds to wait
            callback: Zero-argument callable

        Returns:
            Handle whose ``cancel()`` prevents the call
        """


class ThreadingScheduler(Scheduler):
    """Daemon ``threading.Timer`` per call; usable without an event loop."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class AsyncioScheduler(Scheduler):
    """``loop.call_later`` on the given loop, or the running one."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
