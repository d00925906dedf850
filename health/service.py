"""
Health Service

FastAPI endpoints for liveness, metrics and LLM connectivity.
"""
import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from config import APP_VERSION
from admin.config_store import get_config_store
from core.errors import NetworkError
from LLM.llm_client import check_connectivity
from .metrics import get_metrics_registry
from .schemas import HealthResponse, MetricsResponse, LLMHealthResponse

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Service health.

    **Returns:**
    - `status`: "healthy" if the LLM is configured, "degraded" otherwise
    - `uptime_seconds`, `version`, `timestamp`
    """
    llm_configured = get_config_store().is_configured()
    snapshot = get_metrics_registry().snapshot()

    return HealthResponse(
        status="healthy" if llm_configured else "degraded",
        timestamp=datetime.now().astimezone().isoformat(),
        version=APP_VERSION,
        uptime_seconds=int(snapshot.uptime_seconds),
        llm_configured=llm_configured,
    )


@router.get("/metrics", response_model=MetricsResponse)
async def metrics():
    """Request counters and average latency over the recent window."""
    snapshot = get_metrics_registry().snapshot()

    return MetricsResponse(
        requests_total=snapshot.total_requests,
        requests_success=snapshot.success_count,
        requests_error=snapshot.error_count,
        avg_response_time_ms=snapshot.avg_latency_ms,
        uptime_seconds=int(snapshot.uptime_seconds),
        concurrent_requests=snapshot.concurrent_in_flight,
        recent_latency_samples=len(snapshot.recent_latencies),
    )


@router.get("/health/llm", response_model=LLMHealthResponse)
async def llm_health_check():
    """
    Check that the configured LLM endpoint is reachable.

    **Returns:**
    - 200 when reachable
    - 503 when not configured, unreachable, or answering with an error status
    """
    config = get_config_store().snapshot()
    if not config.is_configured:
        raise HTTPException(status_code=503, detail="Service is not configured")

    try:
        probe = await check_connectivity(config)
    except NetworkError as e:
        logger.warning(f"[LLM_HEALTH] Unreachable | error={e}")
        body = LLMHealthResponse(
            status="unhealthy",
            message="LLM service is not reachable",
            error=str(e),
        )
        return JSONResponse(status_code=503, content=body.model_dump())

    if probe["reachable"]:
        return LLMHealthResponse(
            status="healthy",
            message="LLM service is reachable",
            response_code=probe["response_code"],
        )

    body = LLMHealthResponse(
        status="unhealthy",
        message="LLM service is not reachable",
        response_code=probe["response_code"],
        error=probe["error"],
    )
    return JSONResponse(status_code=503, content=body.model_dump())
