"""Tests for settings loading."""

from pathlib import Path

import pytest

from nginx_resolver.config import Settings, load_settings
from nginx_resolver.errors import ConfigError


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()

        assert settings.sites_dir == Path("/etc/nginx/sites-enabled")
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.log_level == "info"

    def test_yaml_file(self, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text("sites_dir: /srv/nginx/sites\nport: 9090\nunused: true\n")

        settings = load_settings(config)

        assert settings.sites_dir == Path("/srv/nginx/sites")
        assert settings.port == 9090

    def test_yaml_file_from_environment(self, tmp_path, monkeypatch):
        config = tmp_path / "settings.yaml"
        config.write_text("log_level: DEBUG\n")
        monkeypatch.setenv("NGINX_RESOLVER_CONFIG", str(config))

        assert load_settings().log_level == "debug"

    def test_environment_overrides_yaml(self, tmp_path, monkeypatch):
        config = tmp_path / "settings.yaml"
        config.write_text("sites_dir: /from/yaml\nport: 9090\n")
        monkeypatch.setenv("NGINX_RESOLVER_SITES_DIR", str(tmp_path))
        monkeypatch.setenv("NGINX_RESOLVER_PORT", "7000")

        settings = load_settings(config)

        assert settings.sites_dir == tmp_path
        assert settings.port == 7000

    def test_empty_yaml(self, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text("")

        assert load_settings(config).port == 8080

    def test_non_mapping_yaml(self, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            load_settings(config)

    def test_invalid_yaml(self, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text("port: [unclosed\n")

        with pytest.raises(ConfigError):
            load_settings(config)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "missing.yaml")

    @pytest.mark.parametrize("value", ["sites_dir:\n", "sites_dir: 42\n", "sites_dir: [a, b]\n"])
    def test_invalid_sites_dir(self, tmp_path, value):
        config = tmp_path / "settings.yaml"
        config.write_text(value)

        with pytest.raises(ConfigError):
            load_settings(config)

    @pytest.mark.parametrize("port", ["http", 0, 70000])
    def test_bad_port(self, port):
        with pytest.raises(ConfigError):
            Settings(port=port)
