"""nginx-resolver: read-only reverse proxy resolution over HTTP."""

__version__ = "1.0.0"
