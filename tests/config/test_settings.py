"""Tests for configuration loading and paths."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from litellm_statusline.config import paths
from litellm_statusline.config.settings import CacheConfig
from litellm_statusline.config.settings import Config
from litellm_statusline.config.settings import Credentials
from litellm_statusline.config.settings import FetchConfig
from litellm_statusline.config.settings import load_config
from litellm_statusline.config.settings import load_credentials
from litellm_statusline.errors.types import ConfigMissing


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.toml")
        assert config == Config()
        assert config.cache.ttl_ms == 3000
        assert config.fetch.timeout == 5.0
        assert config.display.color is True

    def test_values_from_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            "[cache]\nttl_ms = 10000\npath = '/tmp/x.json'\n"
            "[fetch]\ntimeout = 2.5\n"
            "[display]\ncolor = false\n"
        )
        config = load_config(path)
        assert config.cache == CacheConfig(ttl_ms=10000, path="/tmp/x.json")
        assert config.fetch == FetchConfig(timeout=2.5)
        assert config.display.color is False

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[fetch]\ntimeout = 1\n")
        config = load_config(path)
        assert config.fetch.timeout == 1.0
        assert config.cache.ttl_ms == 3000

    def test_malformed_toml_gives_defaults(self, tmp_path):
        """A broken file never prevents rendering."""
        path = tmp_path / "config.toml"
        path.write_text("[cache\nttl_ms = ")
        assert load_config(path) == Config()

    def test_wrong_types_give_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[cache]\nttl_ms = 'soon'\n")
        assert load_config(path) == Config()

    def test_default_location(self, tmp_path, monkeypatch):
        """LITELLM_STATUSLINE_CONFIG_DIR points at the config directory."""
        monkeypatch.setenv("LITELLM_STATUSLINE_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.toml").write_text("[cache]\nttl_ms = 42\n")
        assert load_config().cache.ttl_ms == 42


class TestCachePath:
    """Tests for Config.cache_path and paths.cache_file."""

    def test_temp_directory_default(self, monkeypatch):
        monkeypatch.delenv("LITELLM_STATUSLINE_CACHE_FILE", raising=False)
        expected = Path(tempfile.gettempdir()) / "litellm-cc-statusline-cache.json"
        assert paths.cache_file() == expected
        assert Config().cache_path() == expected

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LITELLM_STATUSLINE_CACHE_FILE", str(tmp_path / "c.json"))
        assert Config().cache_path() == tmp_path / "c.json"

    def test_config_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LITELLM_STATUSLINE_CACHE_FILE", str(tmp_path / "env.json"))
        config = Config(cache=CacheConfig(path=str(tmp_path / "cfg.json")))
        assert config.cache_path() == tmp_path / "cfg.json"


class TestPaths:
    def test_config_file_in_config_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LITELLM_STATUSLINE_CONFIG_DIR", str(tmp_path))
        assert paths.config_dir() == tmp_path
        assert paths.config_file() == tmp_path / "config.toml"

    def test_claude_settings_file(self):
        assert paths.claude_settings_file() == Path.home() / ".claude" / "settings.json"


class TestCredentials:
    """Tests for load_credentials and Credentials."""

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_BASE_URL", "https://proxy")
        monkeypatch.setenv("ANTHROPIC_AUTH_TOKEN", "sk-1234")
        credentials = load_credentials()
        assert credentials == Credentials(base_url="https://proxy", api_key="sk-1234")
        assert credentials.is_complete

    def test_missing(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_BASE_URL", raising=False)
        monkeypatch.delenv("ANTHROPIC_AUTH_TOKEN", raising=False)
        credentials = load_credentials()
        assert credentials == Credentials()
        assert not credentials.is_complete

    def test_empty_values_are_missing(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_BASE_URL", "https://proxy")
        monkeypatch.setenv("ANTHROPIC_AUTH_TOKEN", "")
        credentials = load_credentials()
        assert credentials.api_key is None
        assert not credentials.is_complete

    def test_require_returns_pair(self):
        credentials = Credentials(base_url="https://proxy", api_key="sk-1234")
        assert credentials.require() == ("https://proxy", "sk-1234")

    def test_require_raises_config_missing(self):
        with pytest.raises(ConfigMissing, match="ANTHROPIC_AUTH_TOKEN"):
            Credentials(base_url="https://proxy").require()
