"""Unit tests for ClientConfig and UIConfig."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from chainref.client.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    get_client_config,
    get_ui_config,
)


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_default_timeouts(self) -> None:
        """Timeouts default to 30s connect, 60s read, 30s write."""
        with patch.dict("os.environ", {}, clear=True):
            config = ClientConfig()

        assert config.connect_timeout == 30.0
        assert config.read_timeout == 60.0
        assert config.write_timeout == 30.0

    def test_default_endpoint(self) -> None:
        """Base URL and path default to the hosted backend."""
        with patch.dict("os.environ", {}, clear=True):
            config = ClientConfig()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.endpoint_path == "/askGemini"
        assert config.log_bodies is True

    def test_timeouts_from_environment(self) -> None:
        """Timeouts are read from CHAIN_API_*_TIMEOUT."""
        env = {
            "CHAIN_API_CONNECT_TIMEOUT": "5",
            "CHAIN_API_READ_TIMEOUT": "7.5",
            "CHAIN_API_WRITE_TIMEOUT": "2",
        }
        with patch.dict("os.environ", env, clear=True):
            config = get_client_config()

        assert config.connect_timeout == 5.0
        assert config.read_timeout == 7.5
        assert config.write_timeout == 2.0

    def test_log_bodies_can_be_disabled(self) -> None:
        """CHAIN_API_LOG_BODIES=false turns off body logging."""
        with patch.dict("os.environ", {"CHAIN_API_LOG_BODIES": "false"}, clear=True):
            config = ClientConfig()

        assert config.log_bodies is False

    def test_rejects_blank_base_url(self) -> None:
        """Blank base URL is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(base_url="   ")

        assert "Base URL required" in str(exc_info.value)

    def test_rejects_non_http_base_url(self) -> None:
        """Base URL must use http or https."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(base_url="ftp://backend")

        assert "http://" in str(exc_info.value)

    def test_rejects_non_positive_timeout(self) -> None:
        """Zero timeouts are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(read_timeout=0)

        assert "read_timeout" in str(exc_info.value)


class TestUIConfig:
    """Tests for UIConfig defaults."""

    def test_default_theme(self) -> None:
        """Default theme is Sabbath unless DEFAULT_THEME is set."""
        with patch.dict("os.environ", {}, clear=True):
            assert get_ui_config().default_theme == "Sabbath"

        with patch.dict("os.environ", {"DEFAULT_THEME": "Grace"}, clear=True):
            assert get_ui_config().default_theme == "Grace"
