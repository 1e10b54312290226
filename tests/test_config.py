"""Tests for settings."""

from httpdesc.config import HttpdescSettings


class TestHttpdescSettings:
    def test_defaults(self, monkeypatch):
        """Defaults apply when no environment is set."""
        for name in ("TIMEOUT", "HTTP_VERSION", "LOG_LEVEL"):
            monkeypatch.delenv(f"HTTPDESC_{name}", raising=False)
        config = HttpdescSettings()
        assert config.timeout == 10.0
        assert config.http_version == "HTTP/1.1"
        assert config.log_level == "WARNING"

    def test_env_prefix(self, monkeypatch):
        """HTTPDESC_ environment variables override defaults."""
        monkeypatch.setenv("HTTPDESC_TIMEOUT", "3.5")
        monkeypatch.setenv("HTTPDESC_HTTP_VERSION", "HTTP/2")
        config = HttpdescSettings()
        assert config.timeout == 3.5
        assert config.http_version == "HTTP/2"
