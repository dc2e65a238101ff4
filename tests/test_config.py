"""Tests for resolver configuration."""

from pathlib import Path

import pytest

from rest_access_control import DEFAULT_BASE_PATH, ResolverConfig


class TestResolverConfig:
    """Tests for ResolverConfig."""

    def test_defaults(self):
        config = ResolverConfig()

        assert config.base_path_prefix == DEFAULT_BASE_PATH == "/api/v1/"
        assert config.permissions_path is None
        assert config.log_level == "INFO"

    def test_from_env_defaults(self):
        assert ResolverConfig.from_env() == ResolverConfig()

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("REST_ACCESS_BASE_PATH", "/api/v2/")
        monkeypatch.setenv("REST_ACCESS_PERMISSIONS_FILE", str(tmp_path / "perms.yaml"))
        monkeypatch.setenv("REST_ACCESS_LOG_LEVEL", "debug")

        config = ResolverConfig.from_env()

        assert config.base_path_prefix == "/api/v2/"
        assert config.permissions_path == tmp_path / "perms.yaml"
        assert isinstance(config.permissions_path, Path)
        assert config.log_level == "DEBUG"

    def test_frozen(self):
        config = ResolverConfig()

        with pytest.raises(AttributeError):
            config.base_path_prefix = "/other/"  # type: ignore[misc]
