"""
Per-client token buckets for the passphrase API
"""

import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict, Optional


@dataclass
class RateLimitConfig:
    """Rate limit configuration"""
    requests_per_minute: int = 60
    burst_size: int = 10
    max_clients: int = 10000


@dataclass
class _Bucket:
    updated: float
    tokens: float


class RateLimiter:
    """
    Token bucket per client address.

    A bucket idle long enough to refill completely is the same as a new one,
    so such buckets are dropped once more than max_clients are tracked.
    """

    def __init__(self, config: Optional[RateLimitConfig] = None, clock: Callable[[], float] = time.monotonic):
        self.config = config or RateLimitConfig()
        self._clock = clock
        self._buckets: Dict[str, _Bucket] = {}
        self._lock = Lock()

    @property
    def refill_per_second(self) -> float:
        return self.config.requests_per_minute / 60.0

    @property
    def full_refill_seconds(self) -> float:
        return self.config.burst_size / self.refill_per_second

    def is_allowed(self, client: str) -> bool:
        """Consume one token for client; False when none is left"""
        with self._lock:
            now = self._clock()
            bucket = self._buckets.get(client)
            if bucket is None:
                if len(self._buckets) >= self.config.max_clients:
                    self._prune(now)
                bucket = _Bucket(updated=now, tokens=float(self.config.burst_size))
                self._buckets[client] = bucket
            else:
                elapsed = max(0.0, now - bucket.updated)
                bucket.tokens = min(
                    float(self.config.burst_size),
                    bucket.tokens + elapsed * self.refill_per_second,
                )
                bucket.updated = now

            if bucket.tokens >= 1:
                bucket.tokens -= 1
                return True
            return False

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._buckets)

    def _prune(self, now: float) -> None:
        """Drop buckets that have refilled completely; then the oldest if still full"""
        idle = [
            client for client, bucket in self._buckets.items()
            if now - bucket.updated >= self.full_refill_seconds
        ]
        for client in idle:
            del self._buckets[client]

        overflow = len(self._buckets) - self.config.max_clients + 1
        if overflow > 0:
            oldest = sorted(self._buckets, key=lambda client: self._buckets[client].updated)
            for client in oldest[:overflow]:
                del self._buckets[client]
