"""Custom exceptions for nginx-resolver."""

from __future__ import annotations


class ResolverError(Exception):
    """Base exception for all nginx-resolver operations."""


class ConfigError(ResolverError):
    """Settings could not be loaded."""


class ParseFailure(ResolverError):
    """A site configuration could not be turned into server blocks."""


class NoServerBlockError(ParseFailure):
    """The configuration text contains no recognizable server block."""

    def __init__(self, message: str = "no server block found") -> None:
        super().__init__(message)
