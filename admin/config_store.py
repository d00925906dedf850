"""
Config Store - runtime LLM configuration shared by all requests.

Simple approach:
- The current Configuration is an immutable object behind a single reference
- Readers take snapshot() and never block
- Writers serialize on a lock, build a new Configuration and swap the reference
- Every applied update is written to disk; a failed write keeps the new
  in-memory state and is reported to the caller
"""
import json
import logging
import threading
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Protocol

from core.errors import ConfigPersistenceError
from core.runtime_config import Configuration
from .config import ADMIN_CONFIG_FILE, ADMIN_PLACEHOLDER_API_KEY

logger = logging.getLogger(__name__)

# Updatable fields, in the order they are reported back
UPDATABLE_FIELDS = ("api_key", "api_url", "model", "system_prompt")


class ConfigPersister(Protocol):
    def persist(self, config: Configuration) -> None:
        ...


class JsonConfigPersister:
    """Reads and writes the runtime configuration as a JSON file."""

    def __init__(self, path: str = ADMIN_CONFIG_FILE):
        self.path = Path(path)

    def load(self) -> Configuration:
        """
        Load configuration from the JSON file.

        Returns defaults when the file does not exist.

        Raises:
            ConfigPersistenceError: If the file exists but cannot be read or parsed
        """
        if not self.path.exists():
            return Configuration()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigPersistenceError(f"Failed to read config file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigPersistenceError(f"Config file {self.path} must contain a JSON object")
        return Configuration.from_file_dict(data)

    def persist(self, config: Configuration) -> None:
        try:
            content = json.dumps(config.to_file_dict(), ensure_ascii=False, indent=2)
            self.path.write_text(content, encoding="utf-8")
        except (OSError, TypeError) as e:
            raise ConfigPersistenceError(f"Failed to write config file {self.path}: {e}") from e
        logger.debug(f"[CONFIG_STORE] Persisted | path={self.path}")


class ConfigStore:
    """
    Concurrency-safe holder of the runtime Configuration.

    snapshot() returns the currently published object. Since a Configuration
    is frozen, callers can use it across awaits without further locking.
    """

    def __init__(
        self,
        initial: Optional[Configuration] = None,
        persister: Optional[ConfigPersister] = None
    ):
        self._current = initial or Configuration()
        self._persister = persister
        self._write_lock = threading.Lock()

    def snapshot(self) -> Configuration:
        return self._current

    def is_configured(self) -> bool:
        return self._current.is_configured

    def update(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        system_prompt: Optional[str] = None
    ) -> List[str]:
        """
        Apply a partial update.

        Only non-empty values overwrite the current ones. An api_key equal
        to the placeholder value is ignored.

        Returns:
            Names of the fields that were applied (empty list if none)

        Raises:
            ConfigPersistenceError: If saving failed. The update stays applied in memory.
        """
        provided = {
            "api_key": api_key,
            "api_url": api_url,
            "model": model,
            "system_prompt": system_prompt,
        }

        with self._write_lock:
            changes = {}
            for name in UPDATABLE_FIELDS:
                value = provided[name]
                if not value:
                    continue
                if name == "api_key" and value == ADMIN_PLACEHOLDER_API_KEY:
                    continue
                changes[name] = value

            if not changes:
                return []

            new_config = replace(self._current, **changes)
            self._current = new_config
            applied = list(changes)

            logger.info(f"[CONFIG_STORE] Updated | fields={','.join(applied)}")

            if self._persister is not None:
                self._persister.persist(new_config)

        return applied


# Global store instance
_store: Optional[ConfigStore] = None


def get_config_store() -> ConfigStore:
    """Get the global config store instance."""
    global _store
    if _store is None:
        _store = ConfigStore(persister=JsonConfigPersister())
    return _store


def init_config_store(path: str = ADMIN_CONFIG_FILE) -> ConfigStore:
    """
    Initialize the global config store from the JSON file at `path`.

    A missing file yields the default (unconfigured) configuration. An
    unreadable file is logged and replaced by defaults on the next save.
    """
    global _store
    persister = JsonConfigPersister(path)
    try:
        initial = persister.load()
    except ConfigPersistenceError as e:
        logger.error(f"[CONFIG_STORE] Load failed, using defaults | error={e}")
        initial = Configuration()
    _store = ConfigStore(initial=initial, persister=persister)
    return _store


def set_config_store(store: ConfigStore) -> ConfigStore:
    """Replace the global config store (used by tests and embedding apps)."""
    global _store
    _store = store
    return _store
