"""
Request metrics shared by every translation request.

Counters and the latency window are guarded by short lock sections so that
handlers running on the event loop and in worker threads can record
concurrently. No lock is held across an await.
"""
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Optional, Tuple

# Number of most recent successful request latencies kept for averaging
LATENCY_WINDOW_SIZE = 1000


@dataclass(frozen=True)
class MetricsSnapshot:
    """Point-in-time copy of the registry state."""
    total_requests: int
    success_count: int
    error_count: int
    concurrent_in_flight: int
    recent_latencies: Tuple[float, ...]
    uptime_seconds: float

    @property
    def avg_latency_ms(self) -> float:
        if not self.recent_latencies:
            return 0.0
        return sum(self.recent_latencies) / len(self.recent_latencies) * 1000


class MetricsRegistry:
    """
    Request counters plus a bounded window of recent latencies (seconds).

    Every record_start() must be followed by exactly one record_success()
    or record_error() for the same request.
    """

    def __init__(self, window_size: int = LATENCY_WINDOW_SIZE):
        self._start_time = time.monotonic()
        self._counter_lock = threading.Lock()
        self._window_lock = threading.Lock()
        self._total = 0
        self._success = 0
        self._error = 0
        self._in_flight = 0
        self._latencies = deque(maxlen=window_size)

    def record_start(self) -> None:
        with self._counter_lock:
            self._total += 1
            self._in_flight += 1

    def record_success(self, duration: float) -> None:
        """
        Record a completed request.

        Args:
            duration: Wall-clock duration in seconds
        """
        with self._counter_lock:
            self._success += 1
            self._in_flight -= 1
        # deque(maxlen) evicts the oldest entry on overflow
        with self._window_lock:
            self._latencies.append(duration)

    def record_error(self) -> None:
        with self._counter_lock:
            self._error += 1
            self._in_flight -= 1

    def snapshot(self) -> MetricsSnapshot:
        with self._counter_lock:
            total, success, error, in_flight = (
                self._total, self._success, self._error, self._in_flight
            )
        with self._window_lock:
            latencies = tuple(self._latencies)
        return MetricsSnapshot(
            total_requests=total,
            success_count=success,
            error_count=error,
            concurrent_in_flight=in_flight,
            recent_latencies=latencies,
            uptime_seconds=time.monotonic() - self._start_time,
        )


# Global registry instance
_registry: Optional[MetricsRegistry] = None


def get_metrics_registry() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _registry
    if _registry is None:
        _registry = MetricsRegistry()
    return _registry


def reset_metrics_registry() -> MetricsRegistry:
    """Replace the global registry with a fresh one."""
    global _registry
    _registry = MetricsRegistry()
    return _registry
