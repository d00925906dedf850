"""Tests for global settings helpers."""

from config import DEFAULT_PORT, estimate_tokens, resolve_port


class TestResolvePort:
    """Test cases for resolve_port."""

    def test_command_line_wins(self, monkeypatch):
        monkeypatch.setenv("PORT", "8000")
        assert resolve_port(7000) == 7000

    def test_environment_used_without_flag(self, monkeypatch):
        monkeypatch.setenv("PORT", "8000")
        assert resolve_port() == 8000

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert resolve_port() == DEFAULT_PORT == 9999

    def test_invalid_environment_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        assert resolve_port() == DEFAULT_PORT


class TestEstimateTokens:
    """Test cases for estimate_tokens."""

    def test_empty_text(self):
        assert estimate_tokens("") == 0

    def test_longer_text_has_more_tokens(self):
        short = estimate_tokens("Hello world. " * 10)
        long = estimate_tokens("Hello world. " * 100)
        assert 0 < short < long
