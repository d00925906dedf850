"""
Translation Configuration

Module-specific settings for text translation.
"""
import os

# =========================
# Input Limits
# =========================

# Maximum characters per text
TRANSLATION_MAX_TEXT_CHARS = int(os.getenv("TRANSLATION_MAX_TEXT_CHARS", "20000"))

# Maximum estimated tokens per text
TRANSLATION_MAX_INPUT_TOKENS = int(os.getenv("TRANSLATION_MAX_INPUT_TOKENS", "6000"))

# =========================
# Batch Processing Settings
# =========================

TRANSLATION_MAX_BATCH_SIZE = int(os.getenv("TRANSLATION_MAX_BATCH_SIZE", "50"))

# Concurrent LLM calls per batch (matches the per-host connection pool)
TRANSLATION_BATCH_CONCURRENCY = int(os.getenv("TRANSLATION_BATCH_CONCURRENCY", "10"))

# =========================
# Response Settings
# =========================

# Prefix of the message returned in `result` when a translation fails
TRANSLATION_FAILURE_PREFIX = "Translation failed"
