"""
Admin Module

Provides:
- ConfigStore holding the runtime LLM configuration
- JSON file persistence
- FastAPI service endpoints
"""

from .config_store import (
    get_config_store,
    init_config_store,
    set_config_store,
    ConfigStore,
    JsonConfigPersister,
)
from .service import router, mask_api_key

__all__ = [
    # Store
    "get_config_store",
    "init_config_store",
    "set_config_store",
    "ConfigStore",
    "JsonConfigPersister",
    # Service
    "router",
    "mask_api_key",
]
