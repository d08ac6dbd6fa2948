"""Server model dataclasses - Structured view of a site configuration file."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class LocationConfig:
    """Proxy settings of the single location tracked per server block.

    Values are kept exactly as written in the file (trimmed), so
    timeouts stay strings like "90" or "60s".
    """

    proxy_pass: str = ""
    proxy_set_headers: dict[str, str] = field(default_factory=dict)
    proxy_no_cache: str = ""
    proxy_cache_bypass: str = ""
    proxy_connect_timeout: str = ""
    proxy_read_timeout: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "proxy_pass": self.proxy_pass,
            "proxy_set_headers": dict(self.proxy_set_headers),
            "proxy_no_cache": self.proxy_no_cache,
            "proxy_cache_bypass": self.proxy_cache_bypass,
            "proxy_connect_timeout": self.proxy_connect_timeout,
            "proxy_read_timeout": self.proxy_read_timeout,
        }


@dataclass
class ServerBlock:
    """Nginx server block."""

    listen_port: int | None = None
    server_names: list[str] = field(default_factory=list)
    location: LocationConfig = field(default_factory=LocationConfig)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "location": self.location.to_dict(),
            "server_name": list(self.server_names),
        }
        # "listen" only appears when the file declared a numeric port
        if self.listen_port is not None:
            data["listen"] = self.listen_port
        return data


@dataclass
class ParseResult:
    """All server blocks of one file plus file metadata."""

    blocks: list[ServerBlock] = field(default_factory=list)
    modification_date: str = ""
    raw_contents: str = ""

    @property
    def server_names(self) -> list[str]:
        """All server names across blocks, in file order."""
        names: list[str] = []
        for block in self.blocks:
            names.extend(block.server_names)
        return names

    def to_dict(self) -> dict[str, Any]:
        return {
            "blocks": [block.to_dict() for block in self.blocks],
            "modification_date": self.modification_date,
            "siteConfigurationContents": self.raw_contents,
        }
