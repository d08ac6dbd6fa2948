"""Sites Scanner - Locates the configuration file serving a domain.

Files live in a single directory (sites-enabled) and are named after the
domain they serve:
- <domain>.conf
- www.<domain>.conf
- <subdomain>.<domain>.conf
"""

import logging
import os
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

UNKNOWN_MODIFICATION_DATE = "unknown"

# Same shape as `stat -c %y`: 2024-01-05 12:34:56.123456 +0000
MODIFICATION_DATE_FORMAT = "%Y-%m-%d %H:%M:%S.%f %z"


class SiteConfigLocator:
    """Maps a domain to its configuration file in a sites directory."""

    SUFFIX = ".conf"

    def __init__(self, config_dir: Path | str) -> None:
        self.config_dir = Path(config_dir)

    @staticmethod
    def split_subdomain(domain: str) -> str:
        """Return the first label of a domain, or "" for two-label domains."""
        labels = domain.split(".")
        if len(labels) <= 2:
            return ""
        return labels[0]

    def candidates(self, domain: str) -> list[Path]:
        """List candidate paths in the order they are checked.

        Args:
            domain: Validated domain name.

        Returns:
            <domain>.conf first, followed by www.<domain>.conf for bare
            domains or <subdomain>.<domain>.conf when a subdomain exists.
        """
        paths = [self._path_for(domain)]
        subdomain = self.split_subdomain(domain)
        if subdomain:
            paths.append(self._path_for(f"{subdomain}.{domain}"))
        else:
            paths.append(self._path_for(f"www.{domain}"))
        return paths

    def locate(self, domain: str) -> Path | None:
        """Find the configuration file for a domain.

        A subdomain-qualified file wins over the plain one even though the
        plain file is checked first. Bare domains fall back to the www.
        variant only when <domain>.conf is missing.

        Returns:
            Path of the first existing candidate, or None.
        """
        path = self._path_for(domain)
        subdomain = self.split_subdomain(domain)

        if not subdomain and not path.is_file():
            path = self._path_for(f"www.{domain}")

        if subdomain:
            subdomain_path = self._path_for(f"{subdomain}.{domain}")
            if subdomain_path.is_file():
                path = subdomain_path

        if not path.is_file():
            logger.debug("No site configuration for %s in %s", domain, self.config_dir)
            return None
        return path

    def _path_for(self, name: str) -> Path:
        return self.config_dir / f"{name}{self.SUFFIX}"


def file_modification_date(path: Path | str, log: logging.Logger | None = None) -> str:
    """Get the modification date of a file.

    Args:
        path: File to stat.
        log: Logger for failures (defaults to this module's logger).

    Returns:
        Local-time modification date, or "unknown" if the file cannot be
        stat'ed.
    """
    log = log or logger
    try:
        mtime = os.stat(path).st_mtime
    except OSError as e:
        log.error("Failed to retrieve modification date of %s: %s", path, e)
        return UNKNOWN_MODIFICATION_DATE
    return datetime.fromtimestamp(mtime).astimezone().strftime(MODIFICATION_DATE_FORMAT)
