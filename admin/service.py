"""
Admin Service

FastAPI endpoints for reading and updating the runtime LLM configuration.
"""
import logging

from fastapi import APIRouter, HTTPException

from core.errors import ConfigPersistenceError
from .config import ADMIN_FIELD_LABELS, ADMIN_MASK_MIN_LENGTH
from .config_store import get_config_store
from .schemas import ConfigUpdateRequest, ConfigResponse, ConfigUpdateResponse

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/admin", tags=["Admin"])


def mask_api_key(key: str) -> str:
    """Show only the first and last 4 characters of an API key."""
    if len(key) <= ADMIN_MASK_MIN_LENGTH:
        return "***"
    return f"{key[:4]}...{key[-4:]}"


# =====================
# API Endpoints
# =====================

@router.get("/config", response_model=ConfigResponse)
async def get_config():
    """
    Get the current configuration.

    **Returns:**
    - `llm_api_url`, `llm_model`, `system_prompt`
    - `llm_api_key_masked`: API key with the middle part hidden
    - `configured`: Whether translation requests can be served
    """
    config = get_config_store().snapshot()
    return ConfigResponse(
        llm_api_url=config.api_url,
        llm_model=config.model,
        llm_api_key_masked=mask_api_key(config.api_key),
        system_prompt=config.system_prompt,
        configured=config.is_configured,
    )


@router.post("/config", response_model=ConfigUpdateResponse)
def update_config(request: ConfigUpdateRequest):
    """
    Update the configuration. Only non-empty fields are applied.

    Declared sync so the file write runs in the threadpool, off the event loop.

    **Returns:**
    - 200 with the list of updated fields
    - 400 if nothing was applied
    - 500 if the configuration could not be saved (in-memory update is kept)
    """
    store = get_config_store()

    try:
        applied = store.update(
            api_url=request.llm_api_url,
            api_key=request.llm_api_key,
            model=request.llm_model,
            system_prompt=request.system_prompt,
        )
    except ConfigPersistenceError as e:
        logger.error(f"[ADMIN_CONFIG] Save failed | error={e}")
        raise HTTPException(
            status_code=500,
            detail={"success": False, "message": f"Failed to save configuration: {e}"}
        )

    if not applied:
        raise HTTPException(
            status_code=400,
            detail={"success": False, "message": "No valid updates provided"}
        )

    labels = ", ".join(ADMIN_FIELD_LABELS[name] for name in applied)
    logger.info(f"[ADMIN_CONFIG] Updated | fields={labels}")

    return ConfigUpdateResponse(
        success=True,
        message=f"Configuration updated and saved ({labels})",
        updated_fields=applied,
    )
