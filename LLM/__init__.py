"""
LLM Module

Provides:
- Async chat completions client with a shared connection pool
- Prompt templates for translation
"""

from .llm_client import (
    translate,
    check_connectivity,
    get_session,
    close_session
)

from .prompts import (
    get_system_prompt,
    build_messages
)

__all__ = [
    # LLM Client
    "translate",
    "check_connectivity",
    "get_session",
    "close_session",
    # Prompts
    "get_system_prompt",
    "build_messages"
]
