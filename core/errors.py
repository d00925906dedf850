"""
Error types shared by all modules.

Every translation failure carries an ErrorKind so callers can tell a
transport problem from an upstream rejection without parsing messages.
"""
from enum import Enum


class ErrorKind(str, Enum):
    NETWORK = "network"
    UPSTREAM_REJECTED = "upstream_rejected"
    EMPTY_RESULT = "empty_result"
    NOT_CONFIGURED = "not_configured"
    VALIDATION = "validation"


class TranslationError(RuntimeError):
    """Base class for recoverable translation failures."""

    kind: ErrorKind = ErrorKind.NETWORK

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(TranslationError):
    """DNS, connect, read or timeout failure talking to the LLM endpoint."""

    kind = ErrorKind.NETWORK


class UpstreamRejectedError(TranslationError):
    """The LLM endpoint answered with a non-2xx status."""

    kind = ErrorKind.UPSTREAM_REJECTED

    def __init__(self, status: int, body: str):
        super().__init__(f"LLM API error (HTTP {status}): {body}")
        self.status = status
        self.body = body


class EmptyResultError(TranslationError):
    """Well-formed response without usable content."""

    kind = ErrorKind.EMPTY_RESULT


class NotConfiguredError(TranslationError):
    kind = ErrorKind.NOT_CONFIGURED

    def __init__(self, message: str = "Service is not configured. Visit /admin/config to set the LLM parameters."):
        super().__init__(message)


class ValidationError(TranslationError):
    kind = ErrorKind.VALIDATION


class ConfigPersistenceError(RuntimeError):
    """Saving the runtime configuration failed. In-memory state is kept."""
