"""
Post-processing of LLM output.
"""
from typing import List

from core.spacing import add_spacing


def normalize_result(original: str, translated: str) -> List[str]:
    """
    Split a translation into paragraphs aligned with the original.

    When both texts have the same number of lines, each translated line is
    returned separately. Otherwise the whole translation is returned as a
    single paragraph. Mixed-script spacing is applied either way.

    Args:
        original: Source text sent to the LLM
        translated: Text returned by the LLM

    Returns:
        List of spacing-normalized paragraphs
    """
    original_paragraphs = original.split("\n")
    translated_paragraphs = translated.split("\n")

    if len(original_paragraphs) == len(translated_paragraphs):
        return [add_spacing(paragraph) for paragraph in translated_paragraphs]

    return [add_spacing(translated)]
