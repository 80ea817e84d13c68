"""
Sliding-window rate limiting per client.
"""

import threading
import time
from typing import Dict, List, Optional


class RateLimiter:
    """
    Allows at most ``limit`` requests per client within ``window`` seconds.

    Timestamps older than the window are pruned on every check, and clients
    with no request left inside the window are dropped once per window, so
    memory stays bounded by the clients active in the last window. Safe to share
    between request handlers running on different threads.
    """

    def __init__(self, limit: int, window: float):
        """
        Initialize the rate limiter.

        Args:
            limit: Maximum number of requests inside one window
            window: Window length in seconds
        """
        if limit < 0:
            raise ValueError("limit must not be negative")
        if window <= 0:
            raise ValueError("window must be positive")
        self.limit = limit
        self.window = window
        self._requests: Dict[str, List[float]] = {}
        self._last_sweep: Optional[float] = None
        self._lock = threading.Lock()

    @property
    def client_count(self) -> int:
        """Number of clients with requests still inside the window."""
        with self._lock:
            return len(self._requests)

    def _sweep(self, cutoff: float) -> None:
        # Drop clients whose newest request has left the window
        stale = [client for client, times in self._requests.items() if times[-1] <= cutoff]
        for client in stale:
            del self._requests[client]

    def allow(self, client_id: str, now: Optional[float] = None) -> bool:
        """
        Record a request for the client if it is within the limit.

        Args:
            client_id: Identifier of the client, usually its IP address
            now: Current time in seconds; defaults to a monotonic clock

        Returns:
            True if the request is allowed, False if the limit is exceeded
        """
        if now is None:
            now = time.monotonic()
        cutoff = now - self.window

        with self._lock:
            if self._last_sweep is None or now - self._last_sweep >= self.window:
                self._sweep(cutoff)
                self._last_sweep = now

            recent = [t for t in self._requests.get(client_id, []) if t > cutoff]
            if len(recent) >= self.limit:
                if recent:
                    self._requests[client_id] = recent
                else:
                    self._requests.pop(client_id, None)
                return False
            recent.append(now)
            self._requests[client_id] = recent
            return True

    def reset(self) -> None:
        """Forget all recorded requests."""
        with self._lock:
            self._requests.clear()
            self._last_sweep = None
