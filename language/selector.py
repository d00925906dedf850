"""
Source/target language selection.
"""
from typing import Callable, Optional, Sequence

from core.models import LanguagePair
from .config import FALLBACK_LANGUAGE
from .detector import detect_language


def select_language_pair(
    text: str,
    destinations: Sequence[str],
    source: Optional[str] = None,
    detect: Callable[[str], str] = detect_language
) -> LanguagePair:
    """
    Resolve the source and target language for a request.

    The source is the explicit `source` when given, otherwise the detected
    language of `text`. The target is the first destination, unless that
    equals the source and a second destination exists, in which case the
    second one is used. No destinations means FALLBACK_LANGUAGE.

    Args:
        text: Text to translate
        destinations: Preferred target languages, in priority order
        source: Explicit source language (skips detection)
        detect: Detector used when no source is given

    Returns:
        LanguagePair(source, target)
    """
    resolved_source = source or detect(text)

    if not destinations:
        target = FALLBACK_LANGUAGE
    elif destinations[0] == resolved_source and len(destinations) > 1:
        target = destinations[1]
    else:
        target = destinations[0]

    return LanguagePair(source=resolved_source, target=target)
