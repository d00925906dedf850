import socket

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from admin.config_store import ConfigStore, set_config_store
from core.runtime_config import Configuration
from health.metrics import reset_metrics_registry
from LLM import llm_client


class FakeLLM:
    """
    Programmable stand-in for an OpenAI-compatible chat completions endpoint.

    `reply` decides the answer for each request: it receives the parsed JSON
    body and returns (status, json_body_or_text_or_bytes).
    """

    def __init__(self):
        self.requests = []
        self.reply = self.echo

    @staticmethod
    def echo(body):
        text = body["messages"][-1]["content"]
        return 200, {"choices": [{"message": {"role": "assistant", "content": f"  [T]{text}  "}}]}

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.json()
        self.requests.append({"headers": dict(request.headers), "body": body})
        status, payload = self.reply(body)
        if isinstance(payload, bytes):
            return web.Response(status=status, body=payload, content_type="text/html")
        if isinstance(payload, str):
            return web.Response(status=status, text=payload)
        return web.json_response(payload, status=status)


def configured(api_url: str = "http://127.0.0.1:1/v1/chat/completions") -> Configuration:
    return Configuration(api_url=api_url, api_key="sk-test-1234567890", model="test-model")


def unused_local_url() -> str:
    """URL of a local port nothing listens on (connection refused)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}/v1/chat/completions"


@pytest.fixture(autouse=True)
def fresh_state():
    """Every test starts with an unconfigured in-memory store and empty metrics."""
    store = set_config_store(ConfigStore())
    registry = reset_metrics_registry()
    yield store, registry


@pytest_asyncio.fixture
async def fake_llm():
    fake = FakeLLM()
    app = web.Application()
    app.router.add_post("/v1/chat/completions", fake.handle)
    server = TestServer(app)
    await server.start_server()
    fake.url = str(server.make_url("/v1/chat/completions"))
    yield fake
    await llm_client.close_session()
    await server.close()


@pytest_asyncio.fixture
async def llm_session_cleanup():
    yield
    await llm_client.close_session()
