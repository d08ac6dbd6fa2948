"""Pytest configuration and fixtures for nginx-resolver tests."""

import pytest

from nginx_resolver.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep NGINX_RESOLVER_* variables from the host out of tests."""
    for name in ("CONFIG", "SITES_DIR", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)


@pytest.fixture
def sample_site_config():
    """Typical reverse proxy site configuration."""
    return '''server {
    listen 443;
    server_name example.com www.example.com;
    location / {
        proxy_pass http://127.0.0.1:3000;
        proxy_set_header Host $host;
        proxy_read_timeout 90;
    }
}
'''


@pytest.fixture
def two_server_config():
    """HTTP redirect block followed by the proxied HTTPS block."""
    return '''# Managed by hand
server {
    listen 80;
    server_name app.example.com;
    return 301 https://$host$request_uri;
}

server {
    listen 443;
    server_name app.example.com;
    ssl_certificate /etc/letsencrypt/live/app.example.com/fullchain.pem;

    location / {
        proxy_pass http://10.0.0.5:8080;
        proxy_set_header X-Real-IP $remote_addr;
        proxy_set_header X-Forwarded-For $proxy_add_x_forwarded_for;
        proxy_no_cache 1;
        proxy_cache_bypass 1;
        proxy_connect_timeout 5s;
        proxy_read_timeout 60s;
    }
}
'''


@pytest.fixture
def sites_dir(tmp_path, sample_site_config, two_server_config):
    """A sites-enabled directory with a few configurations."""
    directory = tmp_path / "sites-enabled"
    directory.mkdir()
    (directory / "example.com.conf").write_text(sample_site_config)
    (directory / "www.example.org.conf").write_text(sample_site_config)
    (directory / "app.example.com.conf").write_text(two_server_config)
    (directory / "empty.example.net.conf").write_text("# nothing here\nupstream backend {\n}\n")
    return directory
