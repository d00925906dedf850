"""
Language Module

Provides:
- Language detection mapped to supported labels
- Source/target language selection
"""

from .config import FALLBACK_LANGUAGE, SUPPORTED_LANGUAGES
from .detector import detect_language
from .selector import select_language_pair

__all__ = [
    "FALLBACK_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "detect_language",
    "select_language_pair",
]
