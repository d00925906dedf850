"""
Domain models passed between the language, LLM and translation modules.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ErrorKind, TranslationError


@dataclass(frozen=True)
class LanguagePair:
    """Resolved source/target labels for one request, e.g. 中文(简体) -> 英语."""
    source: str
    target: str


@dataclass(frozen=True)
class TranslationUnit:
    """One text to translate under a fixed language pair."""
    original_text: str
    language_pair: LanguagePair


@dataclass(frozen=True)
class TranslationOutcome:
    """
    Result of translating one request.

    Exactly one of `paragraphs` (success) or `error_kind` (failure) is meaningful;
    `message` carries the human-readable failure text.
    """
    language_pair: Optional[LanguagePair] = None
    paragraphs: List[str] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, pair: LanguagePair, paragraphs: List[str]) -> "TranslationOutcome":
        return cls(language_pair=pair, paragraphs=list(paragraphs))

    @classmethod
    def failure(
        cls,
        error: TranslationError,
        pair: Optional[LanguagePair] = None,
        message: Optional[str] = None
    ) -> "TranslationOutcome":
        return cls(language_pair=pair, error_kind=error.kind, message=message or str(error))


@dataclass(frozen=True)
class BatchTranslationOutcome:
    """Result of translating a batch: one paragraph list per input text, or a failure."""
    language_pair: Optional[LanguagePair] = None
    items: List[List[str]] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, pair: LanguagePair, items: List[List[str]]) -> "BatchTranslationOutcome":
        return cls(language_pair=pair, items=[list(item) for item in items])

    @classmethod
    def failure(
        cls,
        error: TranslationError,
        pair: Optional[LanguagePair] = None,
        message: Optional[str] = None
    ) -> "BatchTranslationOutcome":
        return cls(language_pair=pair, error_kind=error.kind, message=message or str(error))
