"""
Concurrent batch translation.

Every unit is translated with its own LLM call, all against the same
configuration snapshot. The batch waits for every call to finish, even
after a failure, so no request is left running in the background.
"""
import asyncio
import logging
from typing import List, Sequence

from core.models import TranslationUnit
from core.runtime_config import Configuration
from LLM import llm_client
from .config import TRANSLATION_BATCH_CONCURRENCY

logger = logging.getLogger(__name__)


async def translate_batch(
    units: Sequence[TranslationUnit],
    config: Configuration,
    max_concurrent: int = TRANSLATION_BATCH_CONCURRENCY
) -> List[str]:
    """
    Translate all units concurrently and return results in input order.

    All-or-nothing: if any unit fails, the first failure in input order is
    raised and the successful translations are discarded.

    Args:
        units: Units to translate
        config: Configuration snapshot shared by every call
        max_concurrent: Maximum LLM calls in flight for this batch

    Returns:
        Translated texts, index-aligned with `units`

    Raises:
        TranslationError: The first failure in input order
    """
    num_units = len(units)
    if not num_units:
        return []

    logger.info(f"[BATCH] START | units={num_units} | max_concurrent={max_concurrent}")

    semaphore = asyncio.Semaphore(max_concurrent)
    translations: List[str] = [None] * num_units

    async def translate_one(idx: int, unit: TranslationUnit):
        async with semaphore:
            return idx, await llm_client.translate(unit, config)

    tasks = [translate_one(idx, unit) for idx, unit in enumerate(units)]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    errors = []
    for result in results:
        if isinstance(result, BaseException):
            errors.append(result)
        else:
            idx, translated = result
            translations[idx] = translated

    if errors:
        logger.error(
            f"[BATCH] FAILED | failed={len(errors)}/{num_units} | first_error={errors[0]}"
        )
        raise errors[0]

    logger.info(f"[BATCH] END | all {num_units} units completed")
    return translations
