"""Unit tests for configuration module."""

from __future__ import annotations

from pathlib import Path

import pytest

from micro_presenter.infrastructure.config import Config, ServerConfig, TemplateConfig, get_config


@pytest.mark.unit
class TestConfig:
    """Tests for Config class."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = Config()

        assert config.templates.templates_dir == Path("templates")
        assert config.templates.autoescape is True
        assert config.templates.auto_reload is False
        assert config.routing.canonical_redirects is True
        assert config.server.metrics_server is False
        assert config.server.metrics_port == 8002
        assert config.observability.log_format == "json"

    def test_custom_template_config(self, temp_dir: Path) -> None:
        """Test custom template configuration."""
        templates = TemplateConfig(templates_dir=temp_dir, auto_reload=True)

        assert templates.templates_dir == temp_dir
        assert templates.auto_reload is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test nested settings from environment variables."""
        monkeypatch.setenv("MICRO_PRESENTER_ROUTING__CANONICAL_REDIRECTS", "false")
        monkeypatch.setenv("MICRO_PRESENTER_TEMPLATES__TEMPLATES_DIR", "/srv/views")
        monkeypatch.setenv("MICRO_PRESENTER_OBSERVABILITY__LOG_LEVEL", "DEBUG")

        config = Config()

        assert config.routing.canonical_redirects is False
        assert config.templates.templates_dir == Path("/srv/views")
        assert config.observability.log_level == "DEBUG"

    def test_invalid_port(self) -> None:
        """Test that an out-of-range port raises validation error."""
        with pytest.raises(ValueError):
            ServerConfig(metrics_port=70000)

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ValueError):
            Config(observability={"log_format": "xml"})


@pytest.mark.unit
class TestConfigSingleton:
    """Tests for get_config singleton."""

    def test_get_config_returns_same_instance(self) -> None:
        """Test that get_config returns the same instance."""
        get_config.cache_clear()

        assert get_config() is get_config()

        get_config.cache_clear()
