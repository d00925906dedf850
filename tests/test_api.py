"""HTTP-level tests for the translation, admin and health endpoints."""

import asyncio
import json

import pytest
from fastapi.testclient import TestClient

from admin.config_store import ConfigStore, set_config_store
from conftest import unused_local_url
from LLM import llm_client
from main import create_app, parse_args

CONFIG_UPDATE = {
    "llm_api_url": "http://llm.local/v1/chat/completions",
    "llm_api_key": "sk-test-1234567890",
    "llm_model": "test-model",
}


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"


@pytest.fixture
def client(config_path):
    with TestClient(create_app(config_file=str(config_path))) as test_client:
        yield test_client


@pytest.fixture
def fake_translate(monkeypatch):
    calls = []

    async def translate(unit, config):
        calls.append((unit, config))
        return f"[{unit.language_pair.target}]{unit.original_text}"

    monkeypatch.setattr(llm_client, "translate", translate)
    return calls


class TestTranslateEndpoint:
    """Test cases for POST /translate."""

    def test_translate_success(self, client, fake_translate):
        client.post("/admin/config", json=CONFIG_UPDATE)

        response = client.post("/translate", json={
            "name": "popup",
            "text": "Hello",
            "destination": ["中文(简体)", "英语"],
            "source": "英语",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "Hello"
        assert data["from"] == "英语"
        assert data["to"] == "中文(简体)"
        assert data["result"] == ["[中文(简体)]Hello"]
        assert "ttsURI" not in data
        assert "dict" not in data

    def test_translate_detects_source(self, client, fake_translate):
        client.post("/admin/config", json=CONFIG_UPDATE)

        data = client.post("/translate", json={
            "text": "你好世界",
            "destination": ["中文(简体)", "英语"],
        }).json()

        assert data["from"] == "中文(简体)"
        assert data["to"] == "英语"

    def test_not_configured_is_degraded_with_200(self, client, fake_translate):
        response = client.post("/translate", json={"text": "Hello", "destination": ["中文(简体)"], "source": "英语"})

        assert response.status_code == 200
        data = response.json()
        assert len(data["result"]) == 1
        assert "/admin/config" in data["result"][0]
        assert fake_translate == []

        metrics = client.get("/metrics").json()
        assert metrics["requests_total"] == 1
        assert metrics["requests_error"] == 1

    def test_unreachable_llm_is_degraded_with_200(self, client):
        client.post("/admin/config", json={**CONFIG_UPDATE, "llm_api_url": unused_local_url()})

        response = client.post("/translate", json={"text": "Hello", "destination": ["中文(简体)"], "source": "英语"})

        assert response.status_code == 200
        assert "LLM service unavailable" in response.json()["result"][0]
        assert client.get("/metrics").json()["requests_error"] == 1

    def test_empty_text_is_degraded(self, client):
        response = client.post("/translate", json={"text": "", "destination": ["英语"]})

        assert response.status_code == 200
        assert "cannot be empty" in response.json()["result"][0]

    def test_missing_text_is_rejected(self, client):
        response = client.post("/translate", json={"destination": ["英语"]})
        assert response.status_code == 422


class TestBatchEndpoint:
    """Test cases for POST /translate/batch."""

    def test_batch_success(self, client, fake_translate):
        client.post("/admin/config", json=CONFIG_UPDATE)

        response = client.post("/translate/batch", json={
            "texts": ["one", "two"],
            "destination": ["中文(简体)"],
            "source": "英语",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "completed"
        assert data["from"] == "英语"
        assert [item["result"] for item in data["translations"]] == [["[中文(简体)]one"], ["[中文(简体)]two"]]
        assert [item["index"] for item in data["translations"]] == [0, 1]

    def test_batch_failure(self, client):
        response = client.post("/translate/batch", json={"texts": ["one"], "destination": ["中文(简体)"]})

        data = response.json()
        assert response.status_code == 200
        assert data["status"] == "failed"
        assert data["translations"] == []
        assert "/admin/config" in data["message"]


class TestAdminEndpoints:
    """Test cases for /admin/config."""

    def test_get_unconfigured(self, client):
        data = client.get("/admin/config").json()

        assert data["configured"] is False
        assert data["llm_api_key_masked"] == "***"
        assert data["system_prompt"]

    def test_update_masks_key_and_persists(self, client, config_path):
        response = client.post("/admin/config", json=CONFIG_UPDATE)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["updated_fields"] == ["api_key", "api_url", "model"]
        assert body["message"] == "Configuration updated and saved (API Key, API URL, Model)"

        data = client.get("/admin/config").json()
        assert data["configured"] is True
        assert data["llm_api_key_masked"] == "sk-t...7890"
        assert data["llm_model"] == "test-model"

        saved = json.loads(config_path.read_text(encoding="utf-8"))
        assert saved["llm_api_key"] == "sk-test-1234567890"
        assert saved["llm_api_url"] == CONFIG_UPDATE["llm_api_url"]

    def test_update_persists_off_the_event_loop(self, client):
        class LoopCheckingPersister:
            def __init__(self):
                self.loop_running = None

            def persist(self, config):
                try:
                    asyncio.get_running_loop()
                    self.loop_running = True
                except RuntimeError:
                    self.loop_running = False

        persister = LoopCheckingPersister()
        set_config_store(ConfigStore(persister=persister))

        response = client.post("/admin/config", json={"llm_model": "test-model"})

        assert response.status_code == 200
        assert persister.loop_running is False

    def test_short_key_fully_masked(self, client):
        client.post("/admin/config", json={"llm_api_key": "sk-12345"})
        assert client.get("/admin/config").json()["llm_api_key_masked"] == "***"

    def test_empty_update_is_rejected(self, client):
        response = client.post("/admin/config", json={"llm_api_key": "", "llm_model": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == {"success": False, "message": "No valid updates provided"}

    def test_placeholder_key_is_ignored(self, client):
        response = client.post("/admin/config", json={"llm_api_key": "your-api-key-here"})
        assert response.status_code == 400

    def test_config_loaded_from_file_on_startup(self, config_path):
        config_path.write_text(json.dumps({
            "llm_api_key": "sk-from-file-0000",
            "llm_api_url": "http://llm.local/v1/chat/completions",
            "llm_model": "file-model",
            "system_prompt": "翻译助手",
        }, ensure_ascii=False), encoding="utf-8")

        with TestClient(create_app(config_file=str(config_path))) as client:
            data = client.get("/admin/config").json()

        assert data["configured"] is True
        assert data["llm_model"] == "file-model"
        assert data["system_prompt"] == "翻译助手"


class TestHealthEndpoints:
    """Test cases for /health, /metrics and /health/llm."""

    def test_health_degraded_until_configured(self, client):
        data = client.get("/health").json()
        assert data["status"] == "degraded"
        assert data["llm_configured"] is False

        client.post("/admin/config", json=CONFIG_UPDATE)

        assert client.get("/health").json()["status"] == "healthy"

    def test_metrics_after_success(self, client, fake_translate):
        client.post("/admin/config", json=CONFIG_UPDATE)
        client.post("/translate", json={"text": "Hello", "destination": ["中文(简体)"], "source": "英语"})

        data = client.get("/metrics").json()

        assert data["requests_total"] == 1
        assert data["requests_success"] == 1
        assert data["requests_error"] == 0
        assert data["concurrent_requests"] == 0
        assert data["recent_latency_samples"] == 1
        assert data["avg_response_time_ms"] >= 0

    def test_llm_health_not_configured(self, client):
        assert client.get("/health/llm").status_code == 503

    def test_llm_health_unreachable(self, client):
        client.post("/admin/config", json={**CONFIG_UPDATE, "llm_api_url": unused_local_url()})

        response = client.get("/health/llm")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


class TestCommandLine:
    """Test cases for argument parsing."""

    def test_port_flag(self):
        assert parse_args(["--port", "8080"]).port == 8080
        assert parse_args(["-p", "7000"]).port == 7000

    def test_port_defaults_to_none(self):
        assert parse_args([]).port is None
