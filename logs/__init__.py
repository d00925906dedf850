"""
Logs Module

Provides:
- Logging configuration (console + rotating files)
- Request/Response logging with metrics
- Request id tracking via contextvars
"""

from .logging_config import (
    setup_logging,
    get_llm_logger,
    get_metrics_logger,
    log_llm_request,
    log_llm_response,
    log_metrics,
    RequestContext,
    set_request_id,
    get_request_id,
    clear_request_id,
    generate_request_id,
    LOG_DIR,
)

__all__ = [
    "setup_logging",
    "get_llm_logger",
    "get_metrics_logger",
    "log_llm_request",
    "log_llm_response",
    "log_metrics",
    "RequestContext",
    "set_request_id",
    "get_request_id",
    "clear_request_id",
    "generate_request_id",
    "LOG_DIR",
]
