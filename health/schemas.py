"""
Pydantic schemas for health and metrics endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional


class HealthResponse(BaseModel):
    status: str = Field(..., description="healthy when the LLM is configured, degraded otherwise")
    timestamp: str
    version: str
    uptime_seconds: int
    llm_configured: bool


class MetricsResponse(BaseModel):
    requests_total: int
    requests_success: int
    requests_error: int
    avg_response_time_ms: float
    uptime_seconds: int
    concurrent_requests: int
    recent_latency_samples: int = Field(..., description="Number of latencies in the averaging window")


class LLMHealthResponse(BaseModel):
    status: str
    message: str
    response_code: Optional[int] = None
    error: Optional[str] = None
