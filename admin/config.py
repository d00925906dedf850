"""
Admin Configuration

Module-specific settings for runtime configuration management.
"""
import os

from config import CONFIG_FILE, PLACEHOLDER_API_KEY

# =========================
# Persistence Settings
# =========================

# Path of the JSON file holding the runtime LLM configuration
ADMIN_CONFIG_FILE = os.getenv("ADMIN_CONFIG_FILE", CONFIG_FILE)

# =========================
# Update Rules
# =========================

# API keys equal to this value are ignored on update
ADMIN_PLACEHOLDER_API_KEY = PLACEHOLDER_API_KEY

# Keys of this length or shorter are fully masked in responses
ADMIN_MASK_MIN_LENGTH = 8

# Human-readable names for updated fields (used in responses and logs)
ADMIN_FIELD_LABELS = {
    "api_key": "API Key",
    "api_url": "API URL",
    "model": "Model",
    "system_prompt": "System Prompt",
}
