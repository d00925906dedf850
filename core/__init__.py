"""
Core Module

Shared infrastructure components for all modules:
- Error taxonomy
- Runtime LLM configuration
- Domain models (language pair, translation unit, outcome)
- Validators
"""

from .errors import (
    ErrorKind,
    TranslationError,
    NetworkError,
    UpstreamRejectedError,
    EmptyResultError,
    NotConfiguredError,
    ValidationError,
    ConfigPersistenceError,
)
from .models import LanguagePair, TranslationUnit, TranslationOutcome, BatchTranslationOutcome
from .runtime_config import Configuration
from .spacing import add_spacing
from .validators import (
    validate_token_count,
    validate_text_length,
    validate_required_field,
    validate_batch_size,
)

__all__ = [
    "ErrorKind",
    "TranslationError",
    "NetworkError",
    "UpstreamRejectedError",
    "EmptyResultError",
    "NotConfiguredError",
    "ValidationError",
    "ConfigPersistenceError",
    "Configuration",
    "LanguagePair",
    "TranslationUnit",
    "TranslationOutcome",
    "BatchTranslationOutcome",
    "add_spacing",
    "validate_token_count",
    "validate_text_length",
    "validate_required_field",
    "validate_batch_size",
]
