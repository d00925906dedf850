"""
Language detection.

Maps text to one of the supported language labels. Never fails: empty,
undetectable or unsupported text yields FALLBACK_LANGUAGE.
"""
import logging

from langdetect import DetectorFactory, LangDetectException, detect as langdetect_detect

from .config import FALLBACK_LANGUAGE, LANGUAGE_LABELS, LANGDETECT_SEED

logger = logging.getLogger(__name__)

DetectorFactory.seed = LANGDETECT_SEED


def _is_han(ch: str) -> bool:
    return "\u4e00" <= ch <= "\u9fff" or "\u3400" <= ch <= "\u4dbf"


def _is_kana(ch: str) -> bool:
    return "\u3040" <= ch <= "\u30ff"


def _is_hangul(ch: str) -> bool:
    return "\uac00" <= ch <= "\ud7af" or "\u1100" <= ch <= "\u11ff"


def _detect_by_script(text: str):
    """
    Resolve CJK-dominant text from its script alone.

    The statistical detector is unreliable on short CJK snippets such as
    "你好世界", while the script settles them: Kana means Japanese, Hangul
    means Korean, Han without either means Chinese.
    """
    han = kana = hangul = letters = 0
    for ch in text:
        if not ch.isalpha():
            continue
        letters += 1
        if _is_han(ch):
            han += 1
        elif _is_kana(ch):
            kana += 1
        elif _is_hangul(ch):
            hangul += 1

    if not letters or (han + kana + hangul) * 2 < letters:
        return None
    if kana:
        return LANGUAGE_LABELS["ja"]
    if hangul:
        return LANGUAGE_LABELS["ko"]
    return LANGUAGE_LABELS["zh-cn"]


def detect_language(text: str) -> str:
    """
    Detect the language of `text`.

    Args:
        text: Input text

    Returns:
        A supported language label, or FALLBACK_LANGUAGE
    """
    if not text or not text.strip():
        return FALLBACK_LANGUAGE

    by_script = _detect_by_script(text)
    if by_script:
        return by_script

    try:
        code = langdetect_detect(text)
    except LangDetectException as e:
        logger.debug(f"[DETECT] Undetectable text, using fallback | error={e}")
        return FALLBACK_LANGUAGE

    return LANGUAGE_LABELS.get(code.lower(), FALLBACK_LANGUAGE)
