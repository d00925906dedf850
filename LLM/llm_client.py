"""
LLM Client for OpenAI-compatible chat completions (Async Version).

Supports:
- One translation call per TranslationUnit
- Connection pooling via a shared, lazily created aiohttp session
- Automatic request/response logging
- Typed errors (network / upstream rejected / empty result)
- Connectivity probe for health checks
"""
import time
import asyncio
import aiohttp
from typing import Any, Dict, Optional

from core.errors import (
    TranslationError,
    NetworkError,
    UpstreamRejectedError,
    EmptyResultError,
)
from core.models import TranslationUnit
from core.runtime_config import Configuration
from core.spacing import add_spacing
from .config import (
    LLM_CONNECTION_TIMEOUT,
    LLM_CONNECTION_POOL_LIMIT,
    LLM_CONNECTION_POOL_LIMIT_PER_HOST,
    LLM_CONNECTION_KEEPALIVE_TIMEOUT,
    LLM_TRANSLATION_TEMPERATURE,
    LLM_PROBE_TIMEOUT,
    LLM_PROBE_TEMPERATURE,
    LLM_PROBE_MAX_TOKENS,
)
from .prompts import build_messages
from logs.logging_config import (
    get_llm_logger,
    log_llm_request,
    log_llm_response,
    log_metrics,
)

logger = get_llm_logger()

# Global session for connection pooling
_session: Optional[aiohttp.ClientSession] = None
_session_loop: Optional[asyncio.AbstractEventLoop] = None


async def _discard_session(session: aiohttp.ClientSession) -> None:
    """
    Close a session left over from another event loop.

    When that loop has already been closed its transports cannot be shut
    down any more; the session is then detached so it is marked closed.
    """
    try:
        await session.close()
    except RuntimeError as e:
        logger.debug(f"[LLM] Stale session could not be closed cleanly | error={e}")
        session.detach()


async def get_session() -> aiohttp.ClientSession:
    """
    Get or create the global aiohttp session for connection pooling.

    A session is bound to the event loop that created it, so a new one is
    created when called from a different loop. The previous one is closed first.
    """
    global _session, _session_loop
    loop = asyncio.get_running_loop()
    if _session is None or _session.closed or _session_loop is not loop:
        if _session is not None and not _session.closed:
            await _discard_session(_session)
        timeout = aiohttp.ClientTimeout(total=LLM_CONNECTION_TIMEOUT)
        connector = aiohttp.TCPConnector(
            limit=LLM_CONNECTION_POOL_LIMIT,
            limit_per_host=LLM_CONNECTION_POOL_LIMIT_PER_HOST,
            keepalive_timeout=LLM_CONNECTION_KEEPALIVE_TIMEOUT
        )
        _session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        _session_loop = loop
        logger.debug(
            f"[LLM] Session created | pool_limit={LLM_CONNECTION_POOL_LIMIT} | "
            f"per_host={LLM_CONNECTION_POOL_LIMIT_PER_HOST}"
        )
    return _session


async def close_session():
    """Close the global session. Optional; process exit also reclaims it."""
    global _session, _session_loop
    if _session and not _session.closed:
        await _session.close()
    _session = None
    _session_loop = None


def _auth_headers(config: Configuration) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
    }


def _extract_content(data: Any) -> str:
    """Return the first choice's message content. Other choices are ignored."""
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        raise EmptyResultError("No translation result received from LLM")

    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content.strip():
        raise EmptyResultError("LLM returned an empty translation")
    return content


async def _post_chat_completion(
    url: str,
    headers: Dict[str, str],
    payload: Dict[str, Any]
) -> Any:
    """
    POST a chat completion request and return the decoded JSON body.

    Raises:
        NetworkError: Connection failure, DNS error or timeout
        UpstreamRejectedError: Non-2xx status (carries the response body)
        EmptyResultError: Body is not valid JSON
    """
    try:
        session = await get_session()
        async with session.post(url, json=payload, headers=headers) as r:
            if not 200 <= r.status < 300:
                body = await r.text(errors="replace")
                raise UpstreamRejectedError(r.status, body)
            try:
                return await r.json(content_type=None)
            except (aiohttp.ContentTypeError, ValueError) as e:
                raise EmptyResultError(f"Failed to parse LLM response: {e}")

    except asyncio.TimeoutError:
        logger.error(f"[LLM] Request timed out | url={url}")
        raise NetworkError("LLM request timed out. Please try again.")

    except aiohttp.ClientError as e:
        logger.error(f"[LLM] Request failed | url={url} | error={e}")
        raise NetworkError(f"LLM service unavailable: {e}")


async def translate(unit: TranslationUnit, config: Configuration) -> str:
    """
    Translate one unit with a single chat completion call.

    Args:
        unit: Text and resolved language pair
        config: Configuration snapshot (endpoint, key, model)

    Returns:
        Translated text, stripped and spacing-normalized

    Raises:
        TranslationError: NetworkError, UpstreamRejectedError or EmptyResultError
    """
    pair = unit.language_pair
    payload = {
        "model": config.model,
        "messages": build_messages(unit.original_text, pair.source, pair.target),
        "temperature": LLM_TRANSLATION_TEMPERATURE,
    }

    log_llm_request(
        model=config.model,
        task=f"translate:{pair.source}->{pair.target}",
        prompt=unit.original_text,
        temperature=LLM_TRANSLATION_TEMPERATURE
    )

    start_time = time.time()

    try:
        data = await _post_chat_completion(config.api_url, _auth_headers(config), payload)
        translated = add_spacing(_extract_content(data).strip())

    except TranslationError as e:
        latency_ms = (time.time() - start_time) * 1000
        log_llm_response(
            model=config.model,
            response="",
            latency_ms=latency_ms,
            status="error",
            error_message=str(e)
        )
        log_metrics(
            task="translate",
            latency_ms=latency_ms,
            status="error",
            error_kind=e.kind.value,
            input_chars=len(unit.original_text)
        )
        raise

    latency_ms = (time.time() - start_time) * 1000
    log_llm_response(
        model=config.model,
        response=translated,
        latency_ms=latency_ms,
        status="success"
    )
    log_metrics(
        task="translate",
        latency_ms=latency_ms,
        status="success",
        input_chars=len(unit.original_text),
        output_chars=len(translated)
    )
    return translated


async def check_connectivity(config: Configuration) -> Dict[str, Any]:
    """
    Send a minimal request to check that the LLM endpoint is reachable.

    A 400 answer also counts as reachable: the probe payload may be rejected
    by providers that validate it strictly.

    Returns:
        Dict with `reachable`, `response_code` and `error` (response body when unreachable)

    Raises:
        NetworkError: If the endpoint cannot be contacted at all
    """
    payload = {
        "model": config.model,
        "messages": [{"role": "user", "content": "test"}],
        "max_tokens": LLM_PROBE_MAX_TOKENS,
        "temperature": LLM_PROBE_TEMPERATURE,
    }

    try:
        session = await get_session()
        async with session.post(
            config.api_url,
            json=payload,
            headers=_auth_headers(config),
            timeout=aiohttp.ClientTimeout(total=LLM_PROBE_TIMEOUT)
        ) as r:
            status = r.status
            reachable = 200 <= status < 300 or status == 400
            error = None if reachable else await r.text(errors="replace")

    except asyncio.TimeoutError:
        raise NetworkError("LLM connectivity check timed out.")

    except aiohttp.ClientError as e:
        raise NetworkError(f"LLM service unavailable: {e}")

    logger.info(f"[LLM_PROBE] url={config.api_url} | status={status} | reachable={reachable}")
    return {"reachable": reachable, "response_code": status, "error": error}
