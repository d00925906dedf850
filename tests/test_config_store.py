"""Unit tests for the runtime configuration store."""

import json
import threading

import pytest

from admin.config_store import ConfigStore, JsonConfigPersister, init_config_store
from core.errors import ConfigPersistenceError
from core.runtime_config import Configuration
from config import PLACEHOLDER_API_KEY


class RecordingPersister:
    def __init__(self, fail=False):
        self.saved = []
        self.fail = fail

    def persist(self, config):
        self.saved.append(config)
        if self.fail:
            raise ConfigPersistenceError("disk full")


class TestConfiguration:
    """Test cases for Configuration.is_configured."""

    def test_default_is_not_configured(self):
        assert Configuration().is_configured is False

    def test_all_fields_set_is_configured(self):
        config = Configuration(api_url="http://llm", api_key="sk-abc", model="m")
        assert config.is_configured is True

    def test_placeholder_key_is_not_configured(self):
        config = Configuration(api_url="http://llm", api_key=PLACEHOLDER_API_KEY, model="m")
        assert config.is_configured is False

    def test_empty_system_prompt_is_not_configured(self):
        config = Configuration(api_url="http://llm", api_key="sk-abc", model="m", system_prompt="")
        assert config.is_configured is False


class TestConfigStoreUpdate:
    """Test cases for ConfigStore.update."""

    def test_only_non_empty_fields_applied(self):
        persister = RecordingPersister()
        store = ConfigStore(persister=persister)

        applied = store.update(api_key="", api_url="http://llm/v1/chat/completions")

        assert applied == ["api_url"]
        assert store.snapshot().api_url == "http://llm/v1/chat/completions"
        assert store.snapshot().api_key == ""
        assert len(persister.saved) == 1

    def test_placeholder_api_key_ignored(self):
        store = ConfigStore(initial=Configuration(api_key="sk-real"))
        applied = store.update(api_key=PLACEHOLDER_API_KEY)
        assert applied == []
        assert store.snapshot().api_key == "sk-real"

    def test_nothing_applied_skips_persistence(self):
        persister = RecordingPersister()
        store = ConfigStore(persister=persister)
        assert store.update() == []
        assert persister.saved == []

    def test_all_fields_reported_in_order(self):
        store = ConfigStore()
        applied = store.update(api_url="u", api_key="k", model="m", system_prompt="p")
        assert applied == ["api_key", "api_url", "model", "system_prompt"]

    def test_persistence_failure_keeps_update(self):
        store = ConfigStore(persister=RecordingPersister(fail=True))

        with pytest.raises(ConfigPersistenceError):
            store.update(model="new-model")

        assert store.snapshot().model == "new-model"

    def test_snapshot_is_not_affected_by_later_update(self):
        store = ConfigStore(initial=Configuration(api_url="old", api_key="k", model="m"))
        before = store.snapshot()

        store.update(api_url="new")

        assert before.api_url == "old"
        assert store.snapshot().api_url == "new"

    def test_concurrent_readers_never_see_mixed_state(self):
        store = ConfigStore(initial=Configuration(api_url="url-0", api_key="key-0", model="m"))
        stop = threading.Event()
        mismatches = []

        def reader():
            while not stop.is_set():
                config = store.snapshot()
                if config.api_url[4:] != config.api_key[4:]:
                    mismatches.append(config)

        readers = [threading.Thread(target=reader) for _ in range(4)]
        for t in readers:
            t.start()
        for i in range(1, 500):
            store.update(api_url=f"url-{i}", api_key=f"key-{i}")
        stop.set()
        for t in readers:
            t.join()

        assert mismatches == []
        assert store.snapshot().api_url == "url-499"


class TestJsonConfigPersister:
    """Test cases for the JSON file persistence."""

    def test_missing_file_loads_defaults(self, tmp_path):
        persister = JsonConfigPersister(tmp_path / "config.json")
        assert persister.load() == Configuration()

    def test_persist_then_load(self, tmp_path):
        path = tmp_path / "config.json"
        persister = JsonConfigPersister(path)
        config = Configuration(api_url="http://llm", api_key="sk-abc", model="m", system_prompt="翻译")

        persister.persist(config)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {
            "llm_api_key": "sk-abc",
            "llm_api_url": "http://llm",
            "llm_model": "m",
            "system_prompt": "翻译",
        }
        assert persister.load() == config

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigPersistenceError):
            JsonConfigPersister(path).load()

    def test_persist_into_missing_directory_raises(self, tmp_path):
        persister = JsonConfigPersister(tmp_path / "missing" / "config.json")
        with pytest.raises(ConfigPersistenceError):
            persister.persist(Configuration())

    def test_init_config_store_with_invalid_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[]", encoding="utf-8")
        store = init_config_store(str(path))
        assert store.snapshot() == Configuration()

    def test_store_update_writes_file(self, tmp_path):
        path = tmp_path / "config.json"
        store = init_config_store(str(path))

        store.update(api_url="http://llm", api_key="sk-abc", model="m")

        assert json.loads(path.read_text(encoding="utf-8"))["llm_model"] == "m"
        assert store.is_configured()
