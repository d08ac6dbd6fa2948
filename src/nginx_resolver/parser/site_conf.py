"""Site Configuration Parser.

Parses a single nginx virtual host file (sites-enabled/<domain>.conf) into
ServerBlock objects with their proxy settings.

IMPORTANT DESIGN NOTES:
1. This is a line-oriented state machine, NOT a full nginx grammar
2. Braces are not tracked: a block ends only when the next `server` line starts
3. Every block has exactly one LocationConfig; proxy directives found anywhere
   after the `server` line land in it, inside `location / { }` or not
4. Unknown directives are skipped so newer configs keep parsing
"""

import re
from collections.abc import Callable
from pathlib import Path

from nginx_resolver.errors import NoServerBlockError
from nginx_resolver.model.server import LocationConfig, ParseResult, ServerBlock


class SiteConfigParser:
    """Parser for one site configuration file.

    Lines outside a server block are ignored. Inside one, the first
    matching rule consumes the line.
    """

    # Example: server {   /   server
    SERVER_RE = re.compile(r"^server\s*\{?\s*$")

    # Example: listen 443;
    LISTEN_RE = re.compile(r"^listen (\d+);")

    # Example: server_name example.com www.example.com;
    SERVER_NAME_RE = re.compile(r"^server_name (.+?);")

    # Example: location / {
    LOCATION_RE = re.compile(r"^location / \{")

    # Example: proxy_set_header X-Real-IP $remote_addr;
    SET_HEADER_RE = re.compile(r"^proxy_set_header (\S+)\s+(.+?);")

    # Single-value proxy directives, in match order, mapped to LocationConfig fields
    PROXY_DIRECTIVES = (
        ("proxy_pass", "proxy_pass"),
        ("proxy_no_cache", "proxy_no_cache"),
        ("proxy_cache_bypass", "proxy_cache_bypass"),
        ("proxy_connect_timeout", "proxy_connect_timeout"),
        ("proxy_read_timeout", "proxy_read_timeout"),
    )

    def __init__(self) -> None:
        self._proxy_rules = [
            (re.compile(rf"^{directive} (.+?);"), attr)
            for directive, attr in self.PROXY_DIRECTIVES
        ]
        self._block_rules: list[Callable[[str, ServerBlock], bool]] = [
            self._match_listen,
            self._match_server_name,
            self._match_location,
            self._match_proxy_directive,
            self._match_set_header,
        ]

    def parse(self, text: str) -> ParseResult:
        """Parse site configuration text.

        Args:
            text: Raw contents of a site configuration file.

        Returns:
            ParseResult with one ServerBlock per `server` line, in file order.
            File metadata fields are left empty for the caller to fill.

        Raises:
            NoServerBlockError: If no server block was found.
        """
        blocks: list[ServerBlock] = []
        current: ServerBlock | None = None

        for line in text.split("\n"):
            stripped = line.strip()

            # Skip comments and empty lines
            if not stripped or stripped.startswith("#"):
                continue

            if self.SERVER_RE.match(stripped):
                current = ServerBlock(location=LocationConfig())
                blocks.append(current)
                continue

            if current is None:
                continue

            for rule in self._block_rules:
                if rule(stripped, current):
                    break

        if not blocks:
            raise NoServerBlockError()

        return ParseResult(blocks=blocks)

    def parse_file(self, path: Path | str) -> ParseResult:
        """Read a configuration file as UTF-8 and parse it."""
        return self.parse(Path(path).read_text(encoding="utf-8"))

    def _match_listen(self, line: str, server: ServerBlock) -> bool:
        match = self.LISTEN_RE.match(line)
        if not match:
            return False
        server.listen_port = int(match.group(1))
        return True

    def _match_server_name(self, line: str, server: ServerBlock) -> bool:
        match = self.SERVER_NAME_RE.match(line)
        if not match:
            return False
        server.server_names = match.group(1).split(" ")
        return True

    def _match_location(self, line: str, server: ServerBlock) -> bool:
        # Recognized only so it is not mistaken for anything else
        return bool(self.LOCATION_RE.match(line))

    def _match_proxy_directive(self, line: str, server: ServerBlock) -> bool:
        for pattern, attr in self._proxy_rules:
            match = pattern.match(line)
            if match:
                setattr(server.location, attr, match.group(1).strip())
                return True
        return False

    def _match_set_header(self, line: str, server: ServerBlock) -> bool:
        match = self.SET_HEADER_RE.match(line)
        if not match:
            return False
        # Later duplicates overwrite earlier ones
        server.location.proxy_set_headers[match.group(1)] = match.group(2).strip()
        return True
