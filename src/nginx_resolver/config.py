"""Settings management for nginx-resolver.

Precedence (lowest to highest): built-in defaults, YAML settings file,
NGINX_RESOLVER_* environment variables.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from nginx_resolver.errors import ConfigError

ENV_PREFIX = "NGINX_RESOLVER_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"


@dataclass
class Settings:
    """Runtime settings."""

    sites_dir: Path = Path("/etc/nginx/sites-enabled")
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "info"

    def __post_init__(self) -> None:
        if not isinstance(self.sites_dir, (str, os.PathLike)) or not str(self.sites_dir):
            raise ConfigError(f"Invalid sites_dir: {self.sites_dir!r}")
        self.sites_dir = Path(self.sites_dir).expanduser()
        try:
            self.port = int(self.port)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid port: {self.port!r}") from e
        if not 0 < self.port < 65536:
            raise ConfigError(f"Port out of range: {self.port}")
        self.log_level = str(self.log_level).lower()


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML settings file."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    return data


def load_settings(config_file: Path | str | None = None) -> Settings:
    """Build Settings from defaults, an optional YAML file and the environment.

    Args:
        config_file: YAML settings file. Falls back to $NGINX_RESOLVER_CONFIG.

    Raises:
        ConfigError: If the file is unreadable or a value is invalid.
    """
    known = {f.name for f in fields(Settings)}
    values: dict[str, Any] = {}

    if config_file is None:
        env_config = os.getenv(CONFIG_FILE_ENV)
        if env_config:
            config_file = env_config
    if config_file is not None:
        data = _load_yaml(Path(config_file).expanduser())
        values.update({k: v for k, v in data.items() if k in known})

    for name in known:
        env_value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if env_value:
            values[name] = env_value

    return Settings(**values)
