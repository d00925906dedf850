"""
Pydantic schemas for translation API.

Field names follow the popup-translator plugin protocol (`from`, `to`,
`ttsURI`, `result`), hence the aliases.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class TranslationRequest(BaseModel):
    """Request for text translation."""
    name: Optional[str] = Field(None, description="Caller identifier (unused)")
    text: str = Field(..., description="Text to translate")
    destination: List[str] = Field(default_factory=list, description="Target languages in priority order")
    source: Optional[str] = Field(None, description="Source language (auto-detected if not provided)")


class Phonetic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    tts_uri: Optional[str] = Field(None, alias="ttsURI")
    value: Optional[str] = None


class DictEntry(BaseModel):
    pos: Optional[str] = None
    terms: List[str] = Field(default_factory=list)


class TranslationResponse(BaseModel):
    """
    Response from translation.

    On failure the response is still delivered, with the failure message as
    the only element of `result`.
    """
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Original input text")
    from_: str = Field(..., alias="from", description="Detected or provided source language")
    to: str = Field(..., description="Target language")
    tts_uri: Optional[str] = Field(None, alias="ttsURI")
    link: Optional[str] = None
    phonetic: Optional[List[Phonetic]] = None
    dict_: Optional[List[DictEntry]] = Field(None, alias="dict")
    result: Optional[List[str]] = Field(None, description="Translated paragraphs")


class BatchTranslationRequest(BaseModel):
    """Request for batch text translation."""
    name: Optional[str] = Field(None, description="Caller identifier (unused)")
    texts: List[str] = Field(..., description="List of texts to translate")
    destination: List[str] = Field(default_factory=list, description="Target languages in priority order")
    source: Optional[str] = Field(None, description="Source language (auto-detected if not provided)")


class TranslatedItem(BaseModel):
    """Single translated item in batch response."""
    index: int = Field(..., description="Index of the item in the batch")
    text: str = Field(..., description="Original input text")
    result: List[str] = Field(..., description="Translated paragraphs")


class BatchTranslationResponse(BaseModel):
    """Response from batch translation."""
    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    status: str = Field(..., description="completed or failed")
    message: Optional[str] = Field(None, description="Failure message when status is failed")
    translations: List[TranslatedItem] = Field(default_factory=list)
