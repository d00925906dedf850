"""
Health Module

Provides:
- MetricsRegistry with request counters and latency window
- FastAPI health, metrics and LLM connectivity endpoints
"""

from .metrics import (
    get_metrics_registry,
    reset_metrics_registry,
    MetricsRegistry,
    MetricsSnapshot,
    LATENCY_WINDOW_SIZE,
)
from .service import router

__all__ = [
    "get_metrics_registry",
    "reset_metrics_registry",
    "MetricsRegistry",
    "MetricsSnapshot",
    "LATENCY_WINDOW_SIZE",
    "router",
]
