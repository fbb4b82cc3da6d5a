"""Periodic task scheduling for the clipboard poll loop.

The monitor itself knows nothing about event loops: it exposes ``tick()`` and
asks a scheduler to call it every ``poll_interval`` seconds. Two schedulers
are provided:

- TkScheduler re-arms ``root.after`` and runs ticks on the Tk main loop.
- AsyncioScheduler runs ticks from a task on an asyncio event loop.

Either way ticks run one after another on a single thread and a tick is never
entered while a previous one is still running. An exception escaping a task
is logged and the schedule keeps going.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def seconds_to_ms(seconds: float) -> int:
    """Convert an interval in seconds to whole milliseconds, at least 1"""
    return max(1, int(round(seconds * 1000)))


def _run_task(task: Callable[[], object]) -> None:
    try:
        task()
    except Exception:
        logger.exception("Scheduled task %r failed", task)


class ScheduledTask(ABC):
    """Handle for a periodic task"""

    @abstractmethod
    def cancel(self) -> None:
        """Stop further runs. Safe to call more than once."""
        ...

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        ...


class Scheduler(ABC):
    """Runs a task repeatedly at a fixed interval"""

    @abstractmethod
    def schedule(self, interval: float, task: Callable[[], object]) -> ScheduledTask:
        """Run task every interval seconds until the returned handle is cancelled"""
        ...


class _TkScheduledTask(ScheduledTask):

    def __init__(self, root, interval_ms: int, task):
        self.root = root
        self.interval_ms = interval_ms
        self.task = task
        self._after_id = None
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def arm(self):
        self._after_id = self.root.after(self.interval_ms, self._fire)

    def _fire(self):
        self._after_id = None
        if self._cancelled:
            return
        _run_task(self.task)
        if not self._cancelled:
            self.arm()

    def cancel(self) -> None:
        self._cancelled = True
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None


class TkScheduler(Scheduler):
    """Schedules tasks on a Tk root window's event loop"""

    def __init__(self, root):
        self.root = root

    def schedule(self, interval: float, task: Callable[[], object]) -> ScheduledTask:
        handle = _TkScheduledTask(self.root, seconds_to_ms(interval), task)
        handle.arm()
        return handle


class _AsyncioScheduledTask(ScheduledTask):

    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, task):
        self.interval = interval
        self.task = task
        self._cancelled = False
        self._future = loop.create_task(self._run())

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    async def _run(self):
        while not self._cancelled:
            await asyncio.sleep(self.interval)
            if self._cancelled:
                break
            _run_task(self.task)

    def cancel(self) -> None:
        self._cancelled = True
        if not self._future.done():
            self._future.cancel()


class AsyncioScheduler(Scheduler):
    """Schedules tasks on an asyncio event loop.

    Args:
        loop: Loop to schedule on. Defaults to the running loop, so without it
            ``schedule`` must be called from a coroutine.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop

    def schedule(self, interval: float, task: Callable[[], object]) -> ScheduledTask:
        loop = self.loop or asyncio.get_running_loop()
        return _AsyncioScheduledTask(loop, interval, task)
