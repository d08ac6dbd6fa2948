"""Tests for the HTTP API."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from nginx_resolver import __version__
from nginx_resolver.config import Settings
from nginx_resolver.service import Resolution, ResolutionStatus
from nginx_resolver.web.app import create_app


@pytest.fixture
def client(sites_dir):
    return TestClient(create_app(Settings(sites_dir=sites_dir)))


class TestResolutionEndpoint:
    def test_found(self, client, sample_site_config):
        response = client.get("/reverse-proxy-resolution/example.com")

        assert response.status_code == 200
        message = response.json()["message"]
        assert message["blocks"] == [
            {
                "location": {
                    "proxy_pass": "http://127.0.0.1:3000",
                    "proxy_set_headers": {"Host": "$host"},
                    "proxy_no_cache": "",
                    "proxy_cache_bypass": "",
                    "proxy_connect_timeout": "",
                    "proxy_read_timeout": "90",
                },
                "server_name": ["example.com", "www.example.com"],
                "listen": 443,
            }
        ]
        assert message["modification_date"]
        assert message["siteConfigurationContents"] == sample_site_config

    def test_listen_omitted_when_unset(self, client, sites_dir):
        (sites_dir / "noport.com.conf").write_text("server {\n    server_name noport.com;\n}\n")

        response = client.get("/reverse-proxy-resolution/noport.com")

        assert response.status_code == 200
        assert "listen" not in response.json()["message"]["blocks"][0]

    def test_two_blocks(self, client):
        response = client.get("/reverse-proxy-resolution/app.example.com")

        blocks = response.json()["message"]["blocks"]
        assert [b["listen"] for b in blocks] == [80, 443]
        assert blocks[1]["location"]["proxy_set_headers"] == {
            "X-Real-IP": "$remote_addr",
            "X-Forwarded-For": "$proxy_add_x_forwarded_for",
        }

    def test_invalid_domain(self, client):
        response = client.get("/reverse-proxy-resolution/Example.COM")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid domain"}

    def test_not_found(self, client):
        response = client.get("/reverse-proxy-resolution/unknown.com")

        assert response.status_code == 404
        assert response.json() == {"error": "Domain was not found on proxy server"}

    def test_unparsable_file_is_not_found(self, client):
        response = client.get("/reverse-proxy-resolution/empty.example.net")

        assert response.status_code == 404

    def test_unknown_modification_date(self, client):
        with patch("nginx_resolver.service.file_modification_date", return_value="unknown"):
            response = client.get("/reverse-proxy-resolution/example.com")

        assert response.status_code == 200
        assert response.json()["message"]["modification_date"] == "unknown"

    def test_internal_error(self, client):
        failed = Resolution(ResolutionStatus.INTERNAL_ERROR)
        with patch("nginx_resolver.service.ProxyResolutionService.resolve", return_value=failed):
            response = client.get("/reverse-proxy-resolution/example.com")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestOtherEndpoints:
    def test_flush_cache_is_disabled(self, client):
        response = client.get("/flush-nginx-cache")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to flush Nginx Cache"}

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["version"] == __version__

    def test_health(self, client, sites_dir):
        response = client.get("/health")

        assert response.json() == {"status": "ok", "sites_dir": str(sites_dir)}
