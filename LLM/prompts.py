"""
Prompts for the translation LLM calls.
"""

TRANSLATION_SYSTEM_TEMPLATE = """ROLE: Professional translator
TASK: {source_language} → {target_language} translation

CONSTRAINTS:
- Preserve the complete meaning of the original text
- Output language: {target_language} only
- Keep every paragraph, line break and structural element
- Forbidden: explanations, notes, extra commentary

OUTPUT_FORMAT:
- Translated text only
- No prefix or suffix
- Start directly with the translation

READY."""


def get_system_prompt(source_language: str, target_language: str) -> str:
    """Build the system instruction for one translation call."""
    return TRANSLATION_SYSTEM_TEMPLATE.format(
        source_language=source_language,
        target_language=target_language
    )


def build_messages(text: str, source_language: str, target_language: str) -> list:
    """Chat messages for one translation: system instruction + raw user text."""
    return [
        {"role": "system", "content": get_system_prompt(source_language, target_language)},
        {"role": "user", "content": text},
    ]
