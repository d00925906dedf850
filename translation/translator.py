"""
Translation orchestration.

Sequence per request: validate -> record start -> select languages ->
snapshot config -> LLM call(s) -> normalize -> record success/error.
Failures never raise to the caller; they come back as a degraded outcome
whose message is shown to the user in place of the translation.
"""
import time
import asyncio
import logging
from typing import Callable, List, Optional, Sequence

from config import estimate_tokens
from core.errors import TranslationError, NotConfiguredError, ValidationError
from core.models import (
    LanguagePair,
    TranslationUnit,
    TranslationOutcome,
    BatchTranslationOutcome,
)
from core.validators import (
    validate_required_field,
    validate_text_length,
    validate_token_count,
    validate_batch_size,
)
from admin.config_store import ConfigStore, get_config_store
from health.metrics import MetricsRegistry, get_metrics_registry
from language.detector import detect_language
from language.selector import select_language_pair
from LLM import llm_client
from .config import (
    TRANSLATION_MAX_TEXT_CHARS,
    TRANSLATION_MAX_INPUT_TOKENS,
    TRANSLATION_MAX_BATCH_SIZE,
    TRANSLATION_FAILURE_PREFIX,
)
from .dispatcher import translate_batch
from .normalizer import normalize_result

logger = logging.getLogger(__name__)


def validate_text(text: str, field_name: str = "text") -> None:
    """
    Validate one input text.

    Raises:
        ValidationError: If the text is empty or too long
    """
    validate_required_field(text, field_name, "Translation")
    validate_text_length(text, TRANSLATION_MAX_TEXT_CHARS, "Translation")
    validate_token_count(estimate_tokens(text), TRANSLATION_MAX_INPUT_TOKENS, "Translation")


def failure_message(error: TranslationError) -> str:
    """User-facing text for a failed translation."""
    if isinstance(error, (NotConfiguredError, ValidationError)):
        return error.message
    return f"{TRANSLATION_FAILURE_PREFIX}: {error.message}"


class Translator:
    """Translator composing language selection, LLM calls and metrics."""

    def __init__(
        self,
        config_store: Optional[ConfigStore] = None,
        metrics: Optional[MetricsRegistry] = None,
        detect: Callable[[str], str] = detect_language
    ):
        """
        Initialize the translator.

        Args:
            config_store: Runtime configuration (global store if not given)
            metrics: Metrics registry (global registry if not given)
            detect: Language detector used when no source is given
        """
        self.config_store = config_store or get_config_store()
        self.metrics = metrics or get_metrics_registry()
        self.detect = detect

    def _configured_snapshot(self):
        config = self.config_store.snapshot()
        if not config.is_configured:
            raise NotConfiguredError()
        return config

    async def translate(
        self,
        text: str,
        destinations: Sequence[str],
        source: Optional[str] = None
    ) -> TranslationOutcome:
        """
        Translate one text.

        Args:
            text: Text to translate
            destinations: Preferred target languages, in priority order
            source: Source language (auto-detected if not provided)

        Returns:
            TranslationOutcome with normalized paragraphs, or a degraded outcome
        """
        try:
            validate_text(text)
        except ValidationError as e:
            logger.warning(f"[TRANSLATOR] Rejected input | error={e}")
            return TranslationOutcome.failure(e, message=failure_message(e))

        self.metrics.record_start()
        start_time = time.monotonic()
        pair = select_language_pair(text, destinations, source, detect=self.detect)

        logger.info(f"[TRANSLATOR] Translating {len(text)} chars | {pair.source} -> {pair.target}")

        try:
            config = self._configured_snapshot()
            translated = await llm_client.translate(TranslationUnit(text, pair), config)
        except TranslationError as e:
            self.metrics.record_error()
            logger.error(f"[TRANSLATOR] Translation failed | kind={e.kind.value} | error={e}")
            return TranslationOutcome.failure(e, pair, failure_message(e))
        except (Exception, asyncio.CancelledError):
            self.metrics.record_error()
            raise

        paragraphs = normalize_result(text, translated)
        self.metrics.record_success(time.monotonic() - start_time)

        logger.info(f"[TRANSLATOR] Translation complete | paragraphs={len(paragraphs)}")
        return TranslationOutcome.success(pair, paragraphs)

    async def translate_batch(
        self,
        texts: List[str],
        destinations: Sequence[str],
        source: Optional[str] = None
    ) -> BatchTranslationOutcome:
        """
        Translate several texts under one language pair.

        The pair is resolved from all texts joined together, so every item
        is translated in the same direction.

        Returns:
            BatchTranslationOutcome with one paragraph list per text, or a degraded outcome
        """
        try:
            validate_batch_size(texts, TRANSLATION_MAX_BATCH_SIZE, "Translation")
            for i, text in enumerate(texts):
                validate_text(text, field_name=f"texts[{i}]")
        except ValidationError as e:
            logger.warning(f"[TRANSLATOR] Rejected batch | error={e}")
            return BatchTranslationOutcome.failure(e, message=failure_message(e))

        self.metrics.record_start()
        start_time = time.monotonic()
        pair: LanguagePair = select_language_pair(
            "\n".join(texts), destinations, source, detect=self.detect
        )

        logger.info(f"[TRANSLATOR] Batch translating {len(texts)} items | {pair.source} -> {pair.target}")

        try:
            config = self._configured_snapshot()
            units = [TranslationUnit(text, pair) for text in texts]
            translations = await translate_batch(units, config)
        except TranslationError as e:
            self.metrics.record_error()
            logger.error(f"[TRANSLATOR] Batch translation failed | kind={e.kind.value} | error={e}")
            return BatchTranslationOutcome.failure(e, pair, failure_message(e))
        except (Exception, asyncio.CancelledError):
            self.metrics.record_error()
            raise

        items = [
            normalize_result(original, translated)
            for original, translated in zip(texts, translations)
        ]
        self.metrics.record_success(time.monotonic() - start_time)

        logger.info(f"[TRANSLATOR] Batch translation complete | items={len(items)}")
        return BatchTranslationOutcome.success(pair, items)
