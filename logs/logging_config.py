"""
Logging setup for the translation service.

Provides:
- Console + rotating file handlers (requests, errors, metrics)
- Request id propagation through contextvars, injected into every record
- Helpers for logging LLM requests/responses and per-request metrics
"""
import logging
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import (
    LOG_OUTPUT_DIR,
    LOG_TO_FILE,
    LOG_LEVEL,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
    LOG_PREVIEW_LENGTH,
    LOG_DATE_FORMAT,
    LOG_DETAILED_FORMAT,
    LOG_SIMPLE_FORMAT,
    LOG_FILE_REQUESTS,
    LOG_FILE_ERRORS,
    LOG_FILE_METRICS,
)

LLM_LOGGER_NAME = "llm"
METRICS_LOGGER_NAME = "metrics"

LOG_DIR = Path(LOG_OUTPUT_DIR)

_request_id: ContextVar[str] = ContextVar("request_id", default="-")

_configured = False


# =========================
# Request Context
# =========================

def generate_request_id() -> str:
    return str(uuid.uuid4())


def set_request_id(request_id: str):
    return _request_id.set(request_id)


def get_request_id() -> str:
    return _request_id.get()


def clear_request_id():
    _request_id.set("-")


class RequestContext:
    """
    Bind a request id to every log record emitted inside the block.

    Usage:
        with RequestContext(request_id):
            logger.info("...")
    """

    def __init__(self, request_id: Optional[str] = None):
        self.request_id = request_id or generate_request_id()
        self._token = None

    def __enter__(self) -> "RequestContext":
        self._token = _request_id.set(self.request_id)
        return self

    def __exit__(self, exc_type, exc, tb):
        _request_id.reset(self._token)
        return False


class RequestIdFilter(logging.Filter):
    """Attach the current request id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()
        return True


# =========================
# Setup
# =========================

def _file_handler(filename: str, level: int, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        LOG_DIR / filename,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=LOG_DATE_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def setup_logging(level: str = LOG_LEVEL, to_file: bool = LOG_TO_FILE) -> None:
    """
    Configure root, LLM and metrics loggers. Safe to call more than once.

    Args:
        level: Root log level name (INFO, DEBUG, ...)
        to_file: Also write rotating log files under LOG_OUTPUT_DIR
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_SIMPLE_FORMAT, datefmt=LOG_DATE_FORMAT))
    console.addFilter(RequestIdFilter())
    root.addHandler(console)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        root.addHandler(_file_handler(LOG_FILE_ERRORS, logging.ERROR, LOG_DETAILED_FORMAT))
        get_llm_logger().addHandler(
            _file_handler(LOG_FILE_REQUESTS, logging.DEBUG, LOG_DETAILED_FORMAT)
        )
        get_metrics_logger().addHandler(
            _file_handler(LOG_FILE_METRICS, logging.INFO, LOG_SIMPLE_FORMAT)
        )

    _configured = True


def get_llm_logger() -> logging.Logger:
    return logging.getLogger(LLM_LOGGER_NAME)


def get_metrics_logger() -> logging.Logger:
    return logging.getLogger(METRICS_LOGGER_NAME)


# =========================
# LLM Call Logging
# =========================

def _preview(text: str) -> str:
    text = text.replace("\n", "\\n")
    if len(text) <= LOG_PREVIEW_LENGTH:
        return text
    return text[:LOG_PREVIEW_LENGTH] + "..."


def log_llm_request(model: str, task: str, prompt: str, temperature: float) -> None:
    get_llm_logger().info(
        f"[LLM_REQUEST] model={model} | task={task} | temperature={temperature} | "
        f"prompt_chars={len(prompt)} | prompt={_preview(prompt)}"
    )


def log_llm_response(
    model: str,
    response: str,
    latency_ms: float,
    status: str,
    error_message: Optional[str] = None
) -> None:
    logger = get_llm_logger()
    if status == "success":
        logger.info(
            f"[LLM_RESPONSE] model={model} | status={status} | latency_ms={latency_ms:.1f} | "
            f"response_chars={len(response)} | response={_preview(response)}"
        )
    else:
        logger.error(
            f"[LLM_RESPONSE] model={model} | status={status} | latency_ms={latency_ms:.1f} | "
            f"error={error_message}"
        )


def log_metrics(task: str, latency_ms: float, status: str, **fields) -> None:
    extra = "".join(f" | {key}={value}" for key, value in fields.items())
    get_metrics_logger().info(
        f"[METRICS] task={task} | status={status} | latency_ms={latency_ms:.1f}{extra}"
    )
