"""In-memory fixed-window rate limiting for contact form submissions."""

import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict, Optional

# Rate limiting configuration
RATE_LIMIT_WINDOW_SECONDS = 60
RATE_LIMIT_MAX_REQUESTS = 3


@dataclass
class RateLimitRecord:
    count: int
    window_start: float


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    remaining: int


class RateLimiter:
    """
    Fixed-window limiter keyed by client identifier.

    The counter resets entirely once the window has elapsed since the first
    request of that window, so a client can get up to twice the limit in a
    short burst straddling a boundary. State is per-process and is not shared
    between server instances.
    """

    def __init__(
        self,
        max_requests: int = RATE_LIMIT_MAX_REQUESTS,
        window_seconds: float = RATE_LIMIT_WINDOW_SECONDS,
        clock: Optional[Callable[[], float]] = None,
        records: Optional[Dict[str, RateLimitRecord]] = None,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock or time.monotonic
        self._records: Dict[str, RateLimitRecord] = records if records is not None else {}
        self._lock = Lock()

    def check_and_consume(self, identifier: str) -> RateLimitDecision:
        """Admit or reject one submission for identifier. Never raises."""
        now = self._clock()
        with self._lock:
            record = self._records.get(identifier)

            if record is None or now - record.window_start >= self.window_seconds:
                self._records[identifier] = RateLimitRecord(count=1, window_start=now)
                return RateLimitDecision(allowed=True, remaining=self.max_requests - 1)

            if record.count >= self.max_requests:
                return RateLimitDecision(allowed=False, remaining=0)

            record.count += 1
            return RateLimitDecision(allowed=True, remaining=self.max_requests - record.count)

    def get_record(self, identifier: str) -> Optional[RateLimitRecord]:
        """Return the live record for identifier, or None if absent or expired."""
        now = self._clock()
        with self._lock:
            record = self._records.get(identifier)
            if record is None or now - record.window_start >= self.window_seconds:
                return None
            return RateLimitRecord(count=record.count, window_start=record.window_start)

    def reset(self) -> None:
        with self._lock:
            self._records.clear()
