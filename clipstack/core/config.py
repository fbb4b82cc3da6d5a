"""Construction-time settings for the history monitor."""

from dataclasses import dataclass

from .exceptions import ConfigurationError
from .history import DEFAULT_CAPACITY
from .scheduler import seconds_to_ms

DEFAULT_POLL_INTERVAL = 0.5  # seconds


@dataclass(frozen=True)
class MonitorConfig:
    """History and polling settings.

    Attributes:
        capacity: Maximum number of history entries kept.
        poll_interval: Seconds between clipboard polls.
        start_enabled: Whether monitoring is active at startup.
    """
    capacity: int = DEFAULT_CAPACITY
    poll_interval: float = DEFAULT_POLL_INTERVAL
    start_enabled: bool = True

    def __post_init__(self):
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity < 1:
            raise ConfigurationError(f"capacity must be a positive integer, got {self.capacity!r}")
        if isinstance(self.poll_interval, bool) or not isinstance(self.poll_interval, (int, float)):
            raise ConfigurationError(f"poll_interval must be a number, got {self.poll_interval!r}")
        if self.poll_interval <= 0:
            raise ConfigurationError(f"poll_interval must be positive, got {self.poll_interval!r}")

    @property
    def poll_interval_ms(self) -> int:
        return seconds_to_ms(self.poll_interval)

    @classmethod
    def from_args(cls, args) -> "MonitorConfig":
        """Build config from parsed command line arguments"""
        return cls(
            capacity=args.capacity,
            poll_interval=args.interval_ms / 1000,
            start_enabled=not args.paused,
        )
