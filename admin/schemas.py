"""
Pydantic schemas for the admin API.
"""
from pydantic import BaseModel, Field
from typing import Optional, List


class ConfigUpdateRequest(BaseModel):
    """Partial configuration update. Empty or missing fields are left unchanged."""
    llm_api_key: Optional[str] = Field(None, description="API key for the LLM endpoint")
    llm_api_url: Optional[str] = Field(None, description="Chat completions URL")
    llm_model: Optional[str] = Field(None, description="Model identifier")
    system_prompt: Optional[str] = Field(None, description="System prompt")


class ConfigResponse(BaseModel):
    """Current configuration with the API key masked."""
    llm_api_url: str
    llm_model: str
    llm_api_key_masked: str
    system_prompt: str
    configured: bool


class ConfigUpdateResponse(BaseModel):
    success: bool
    message: str
    updated_fields: List[str] = Field(default_factory=list)
