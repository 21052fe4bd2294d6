"""Unit tests for ClientConfig."""

import pytest

from cradle.api.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, ClientConfig
from cradle.api.core import ConfigurationError


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig(api_key="k")

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_ms == DEFAULT_TIMEOUT_MS
        assert config.timeout_seconds == 30.0

    def test_trailing_slash_stripped(self):
        assert ClientConfig(api_key="k", base_url="https://x.io/").base_url == "https://x.io"

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError, match="api_key"):
            ClientConfig(api_key="")

    def test_empty_base_url(self):
        with pytest.raises(ConfigurationError):
            ClientConfig(api_key="k", base_url="")

    @pytest.mark.parametrize("timeout_ms", [0, -5])
    def test_non_positive_timeout(self, timeout_ms):
        with pytest.raises(ConfigurationError, match="timeout_ms"):
            ClientConfig(api_key="k", timeout_ms=timeout_ms)

    def test_frozen(self):
        config = ClientConfig(api_key="k")
        with pytest.raises(AttributeError):
            config.api_key = "other"


class TestFromEnv:
    def test_reads_all_variables(self):
        config = ClientConfig.from_env(
            {
                "CRADLE_API_KEY": "k",
                "CRADLE_API_URL": "https://api.cradle.test/",
                "CRADLE_API_TIMEOUT_MS": "5000",
            }
        )

        assert config == ClientConfig(
            api_key="k", base_url="https://api.cradle.test", timeout_ms=5000
        )

    def test_fallback_key_variable(self):
        assert ClientConfig.from_env({"API_SECRET_KEY": "legacy"}).api_key == "legacy"

    def test_primary_key_wins(self):
        env = {"CRADLE_API_KEY": "new", "API_SECRET_KEY": "legacy"}
        assert ClientConfig.from_env(env).api_key == "new"

    def test_missing_key(self):
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env({})

    def test_bad_timeout(self):
        with pytest.raises(ConfigurationError, match="CRADLE_API_TIMEOUT_MS"):
            ClientConfig.from_env({"CRADLE_API_KEY": "k", "CRADLE_API_TIMEOUT_MS": "soon"})

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("CRADLE_API_KEY", "from-env")
        monkeypatch.delenv("CRADLE_API_URL", raising=False)
        monkeypatch.delenv("CRADLE_API_TIMEOUT_MS", raising=False)

        config = ClientConfig.from_env()

        assert config.api_key == "from-env"
        assert config.base_url == DEFAULT_BASE_URL
