"""Model package - Core data structures for nginx-resolver."""

from nginx_resolver.model.server import LocationConfig, ParseResult, ServerBlock

__all__ = [
    "LocationConfig",
    "ParseResult",
    "ServerBlock",
]
