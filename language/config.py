"""
Language Configuration

Supported language labels and detector settings.
"""
import os

# =========================
# Language Labels
# =========================

# Target used when the request names no destination, and detector fallback
FALLBACK_LANGUAGE = os.getenv("FALLBACK_LANGUAGE", "英语")

# Detector language code -> display label used in prompts and responses
LANGUAGE_LABELS = {
    "zh-cn": "中文(简体)",
    "zh-tw": "中文(简体)",
    "ja": "日语",
    "ko": "韩语",
    "ru": "俄语",
    "es": "西班牙语",
    "fr": "法语",
    "de": "德语",
    "ar": "阿拉伯语",
    "pt": "葡萄牙语",
    "it": "意大利语",
    "vi": "越南语",
    "en": "英语",
}

SUPPORTED_LANGUAGES = sorted(set(LANGUAGE_LABELS.values()))

# =========================
# Detector Settings
# =========================

# Fixed seed so langdetect gives the same answer for the same text
LANGDETECT_SEED = int(os.getenv("LANGDETECT_SEED", "0"))
