"""
LLM Client Configuration

Module-specific settings for the chat completions client.
"""
import os

# =========================
# Connection Settings
# =========================

# HTTP client timeout in seconds (whole request)
LLM_CONNECTION_TIMEOUT = int(os.getenv("LLM_CONNECTION_TIMEOUT", "60"))

# Connection pool limits
LLM_CONNECTION_POOL_LIMIT = int(os.getenv("LLM_CONNECTION_POOL_LIMIT", "100"))
LLM_CONNECTION_POOL_LIMIT_PER_HOST = int(os.getenv("LLM_CONNECTION_POOL_LIMIT_PER_HOST", "10"))

# Idle keep-alive connections are closed after this many seconds
LLM_CONNECTION_KEEPALIVE_TIMEOUT = int(os.getenv("LLM_CONNECTION_KEEPALIVE_TIMEOUT", "30"))

# =========================
# Generation Defaults
# =========================

# Low temperature keeps translations stable between calls
LLM_TRANSLATION_TEMPERATURE = float(os.getenv("LLM_TRANSLATION_TEMPERATURE", "0.3"))

# =========================
# Connectivity Probe
# =========================

LLM_PROBE_TIMEOUT = int(os.getenv("LLM_PROBE_TIMEOUT", "10"))
LLM_PROBE_TEMPERATURE = 0.1
LLM_PROBE_MAX_TOKENS = 1
