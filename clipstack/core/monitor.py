"""Clipboard polling and change detection."""

import logging
from datetime import datetime
from enum import Enum, auto
from typing import Callable, Optional

from .clipboard import ClipboardPort
from .config import DEFAULT_POLL_INTERVAL
from .exceptions import ConfigurationError, PlatformError
from .history import Entry, HistoryStore
from .scheduler import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)


class MonitorState(Enum):
    """Enum for monitor states"""
    ENABLED = auto()   # Ticks read the clipboard
    DISABLED = auto()  # Ticks are no-ops


class Monitor:
    """Turns a polled clipboard into history entries.

    ``last_seen`` holds the text most recently observed on the clipboard,
    whether it was copied by another application or written back by
    ``copy_back``. A tick only records text that differs from it, so
    reactivating an old entry is not captured a second time.

    Read failures during a tick are skipped and retried on the next tick.
    Write failures in ``copy_back`` are raised to the caller.
    """

    def __init__(self, store: HistoryStore, clipboard: ClipboardPort,
                 poll_interval: float = DEFAULT_POLL_INTERVAL, enabled: bool = True,
                 clock: Callable[[], datetime] = datetime.now):
        if poll_interval <= 0:
            raise ConfigurationError(f"poll_interval must be positive, got {poll_interval!r}")
        self.store = store
        self.clipboard = clipboard
        self.poll_interval = poll_interval
        self.clock = clock
        self._state = MonitorState.ENABLED if enabled else MonitorState.DISABLED
        self._last_seen = ""
        self._scheduled: Optional[ScheduledTask] = None

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def enabled(self) -> bool:
        return self._state is MonitorState.ENABLED

    @property
    def last_seen(self) -> str:
        return self._last_seen

    def set_enabled(self, enabled: bool) -> None:
        """Gate future ticks. A tick already running is not affected."""
        new_state = MonitorState.ENABLED if enabled else MonitorState.DISABLED
        if new_state is not self._state:
            logger.info("Clipboard monitoring %s", "enabled" if enabled else "disabled")
        self._state = new_state

    def prime(self) -> None:
        """Treat the text already on the clipboard as seen.

        Called once at startup so that whatever was copied before launch is
        not recorded.
        """
        try:
            self._last_seen = self.clipboard.read()
        except PlatformError as e:
            logger.debug("Could not read initial clipboard content: %s", e)
            self._last_seen = ""

    def tick(self) -> bool:
        """Poll the clipboard once.

        Returns:
            bool: True if a new entry was pushed to the store
        """
        if not self.enabled:
            return False

        try:
            content = self.clipboard.read()
        except PlatformError as e:
            logger.debug("Clipboard read failed, skipping tick: %s", e)
            return False

        if not content or content == self._last_seen:
            return False

        self.store.push(Entry(content, self.clock()))
        self._last_seen = content
        logger.info("Captured clipboard entry (%d chars), history size %d", len(content), len(self.store))
        return True

    def copy_back(self, content: str) -> None:
        """Write content to the clipboard.

        Works on the literal text, whether or not it is still in the store.

        Raises:
            PlatformError: If the clipboard rejected the write.
        """
        try:
            self.clipboard.write(content)
        except PlatformError as e:
            logger.warning("Failed to set clipboard: %s", e)
            raise
        self._last_seen = content

    def start(self, scheduler: Scheduler) -> ScheduledTask:
        """Schedule tick() every poll_interval seconds"""
        self.stop()
        self._scheduled = scheduler.schedule(self.poll_interval, self.tick)
        return self._scheduled

    def stop(self) -> None:
        if self._scheduled is not None:
            self._scheduled.cancel()
            self._scheduled = None
