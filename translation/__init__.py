"""
Translation Service Module

Provides text translation capabilities using LLM.
"""

from .service import router
from .translator import Translator

__all__ = ["router", "Translator"]
