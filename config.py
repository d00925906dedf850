"""
Global Configuration

Shared settings used across all modules.
Module-specific settings are in each module's config.py file.

All settings can be overridden via environment variables or a .env file.
See .env.example for a complete list of configurable variables.
"""
import os
from dotenv import load_dotenv

# Load .env file before any os.getenv() calls
load_dotenv()

# Try to import tiktoken for accurate token estimation
# For airgapped systems, set TIKTOKEN_CACHE_DIR to a directory containing pre-cached encoding files.
try:
    import tiktoken
    _encoder = tiktoken.get_encoding("cl100k_base")
    TIKTOKEN_AVAILABLE = True
except Exception:
    TIKTOKEN_AVAILABLE = False
    _encoder = None

# =========================
# Service Settings
# =========================

APP_NAME = "llm-translate"
APP_VERSION = "0.1.0"

DEFAULT_HOST = os.getenv("HOST", "0.0.0.0")
DEFAULT_PORT = 9999

# =========================
# Runtime LLM Configuration
# =========================

# Persisted runtime configuration (editable through /admin/config)
CONFIG_FILE = os.getenv("CONFIG_FILE", "config.json")

# Sentinel value shipped in example configs; never treated as a real key
PLACEHOLDER_API_KEY = "your-api-key-here"

DEFAULT_SYSTEM_PROMPT = os.getenv(
    "DEFAULT_SYSTEM_PROMPT",
    "你是一个专业的翻译助手。请将用户提供的文本准确、自然地翻译成目标语言。"
    "保持原文的语气和风格，确保翻译结果符合目标语言的表达习惯。"
    "只返回翻译结果，不要添加额外的解释或说明。"
)


# =========================
# Utility Functions
# =========================

def resolve_port(cli_port: int = None) -> int:
    """
    Resolve the listening port.

    Priority: command line argument > PORT environment variable > DEFAULT_PORT.
    An unparseable PORT value falls back to DEFAULT_PORT.
    """
    if cli_port is not None:
        return cli_port
    try:
        return int(os.environ["PORT"])
    except (KeyError, ValueError):
        return DEFAULT_PORT


def estimate_tokens(text: str) -> int:
    """
    Estimate token count using tiktoken if available, otherwise fallback to char-based estimation.

    tiktoken provides accurate token counts compatible with modern LLMs.
    Fallback uses ~4 chars per token approximation.
    """
    if TIKTOKEN_AVAILABLE and _encoder is not None:
        return len(_encoder.encode(text))
    # Fallback: ~4 chars per token (less accurate)
    return len(text) // 4
