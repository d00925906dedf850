"""
Runtime LLM configuration.

A Configuration is immutable: ConfigStore publishes a new object on every
update, so a snapshot taken before a network call stays valid for the
whole call (or the whole batch).
"""
from dataclasses import dataclass
from typing import Any, Dict

from config import PLACEHOLDER_API_KEY, DEFAULT_SYSTEM_PROMPT

# Field name -> key used in the persisted JSON file
_FILE_KEYS = {
    "api_key": "llm_api_key",
    "api_url": "llm_api_url",
    "model": "llm_model",
    "system_prompt": "system_prompt",
}


@dataclass(frozen=True)
class Configuration:
    """Connection settings for the OpenAI-compatible chat completions endpoint."""
    api_url: str = ""
    api_key: str = ""
    model: str = ""
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    @property
    def is_configured(self) -> bool:
        return bool(
            self.api_url
            and self.api_key
            and self.model
            and self.system_prompt
            and self.api_key != PLACEHOLDER_API_KEY
        )

    def to_file_dict(self) -> Dict[str, str]:
        return {file_key: getattr(self, name) for name, file_key in _FILE_KEYS.items()}

    @classmethod
    def from_file_dict(cls, data: Dict[str, Any]) -> "Configuration":
        values = {}
        for name, file_key in _FILE_KEYS.items():
            if data.get(file_key) is not None:
                values[name] = str(data[file_key])
        return cls(**values)
