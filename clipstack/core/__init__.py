"""Core clipboard history components."""

from .clipboard import ClipboardPort, PyperclipClipboard
from .config import MonitorConfig
from .exceptions import (ClipboardReadError, ClipboardWriteError, ClipstackError,
                         ConfigurationError, PlatformError)
from .history import Entry, HistoryStore
from .monitor import Monitor, MonitorState
from .query import query
from .scheduler import AsyncioScheduler, ScheduledTask, Scheduler, TkScheduler

__all__ = [
    "AsyncioScheduler",
    "ClipboardPort",
    "ClipboardReadError",
    "ClipboardWriteError",
    "ClipstackError",
    "ConfigurationError",
    "Entry",
    "HistoryStore",
    "Monitor",
    "MonitorConfig",
    "MonitorState",
    "PlatformError",
    "PyperclipClipboard",
    "ScheduledTask",
    "Scheduler",
    "TkScheduler",
    "query",
]
