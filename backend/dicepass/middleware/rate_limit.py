"""
In-memory token bucket limiting generation requests per client
"""

import math
import time
from dataclasses import dataclass
from threading import Lock
from typing import Dict


@dataclass
class RateLimitConfig:
    """Rate limit configuration"""
    requests_per_minute: int = 60
    burst_size: int = 10


@dataclass
class _Bucket:
    updated: float
    tokens: float


class RateLimiter:
    """
    Token bucket per client address.

    Each client starts with burst_size tokens and regains
    requests_per_minute tokens per minute, capped at burst_size.
    """

    def __init__(self, config: RateLimitConfig = None, sweep_interval: int = 256):
        self.config = config or RateLimitConfig()
        self.sweep_interval = sweep_interval
        self._buckets: Dict[str, _Bucket] = {}
        self._calls = 0
        self._lock = Lock()

    @classmethod
    def from_settings(cls, active_settings) -> "RateLimiter":
        return cls(RateLimitConfig(
            requests_per_minute=active_settings.RATE_LIMIT_PER_MINUTE,
            burst_size=active_settings.RATE_LIMIT_BURST,
        ))

    @property
    def refill_per_second(self) -> float:
        return self.config.requests_per_minute / 60.0

    def _refill(self, client: str, now: float) -> _Bucket:
        bucket = self._buckets.get(client)
        if bucket is None:
            bucket = self._buckets[client] = _Bucket(now, float(self.config.burst_size))
            return bucket

        elapsed = max(0.0, now - bucket.updated)
        bucket.tokens = min(
            float(self.config.burst_size),
            bucket.tokens + elapsed * self.refill_per_second,
        )
        bucket.updated = now
        return bucket

    def is_allowed(self, client: str) -> bool:
        """Consume one token; False when the client has none left"""
        with self._lock:
            now = time.monotonic()
            self._calls += 1
            if self._calls % self.sweep_interval == 0:
                self._sweep(now)

            bucket = self._refill(client, now)
            if bucket.tokens < 1:
                return False
            bucket.tokens -= 1
            return True

    def retry_after(self, client: str) -> int:
        """Whole seconds until the client has a token again"""
        with self._lock:
            bucket = self._refill(client, time.monotonic())
            if bucket.tokens >= 1:
                return 0
            return max(1, math.ceil((1 - bucket.tokens) / self.refill_per_second))

    def _sweep(self, now: float):
        """Drop buckets that have refilled completely"""
        # A full bucket is the same as a new one, so nothing is lost
        refill_seconds = self.config.burst_size / self.refill_per_second
        idle = [c for c, b in self._buckets.items() if now - b.updated >= refill_seconds]
        for client in idle:
            del self._buckets[client]

    def get_stats(self) -> dict:
        with self._lock:
            return {
                "tracked_clients": len(self._buckets),
                "config": {
                    "requests_per_minute": self.config.requests_per_minute,
                    "burst_size": self.config.burst_size,
                },
            }
