"""Proxy resolution service.

Orchestrates validation, file lookup, parsing and metadata for one
domain. Each call works on the file as it is at read time; nothing is
cached between calls.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from nginx_resolver.errors import ParseFailure
from nginx_resolver.model.server import ParseResult
from nginx_resolver.parser.site_conf import SiteConfigParser
from nginx_resolver.scanner.domain import is_valid_domain
from nginx_resolver.scanner.sites import SiteConfigLocator, file_modification_date


class ResolutionStatus(Enum):
    """Outcome of a resolution."""

    FOUND = "found"
    INVALID_DOMAIN = "invalid_domain"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


@dataclass
class Resolution:
    """Result of resolving one domain."""

    status: ResolutionStatus
    result: ParseResult | None = None
    path: Path | None = None

    @property
    def found(self) -> bool:
        return self.status is ResolutionStatus.FOUND


class ProxyResolutionService:
    """Resolves a domain to the parsed contents of its site configuration."""

    def __init__(
        self,
        sites_dir: Path | str,
        parser: SiteConfigParser | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.locator = SiteConfigLocator(sites_dir)
        self.parser = parser or SiteConfigParser()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def sites_dir(self) -> Path:
        return self.locator.config_dir

    def resolve(self, domain: str) -> Resolution:
        """Resolve a domain.

        Read and parse failures are logged and reported as NOT_FOUND; a file
        without any server block is treated like a missing file.

        Args:
            domain: Domain name as received from the client.

        Returns:
            Resolution carrying the ParseResult when FOUND.
        """
        if not is_valid_domain(domain):
            return Resolution(ResolutionStatus.INVALID_DOMAIN)

        path = self.locator.locate(domain)
        if path is None:
            return Resolution(ResolutionStatus.NOT_FOUND)

        try:
            modification_date = file_modification_date(path, self.logger)
            contents = path.read_text(encoding="utf-8")
            result = self.parser.parse(contents)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error("Failed to read %s for %s: %s", path, domain, e)
            return Resolution(ResolutionStatus.NOT_FOUND, path=path)
        except ParseFailure as e:
            self.logger.warning("Unusable configuration %s for %s: %s", path, domain, e)
            return Resolution(ResolutionStatus.NOT_FOUND, path=path)
        except Exception:
            self.logger.exception("Unexpected error resolving %s from %s", domain, path)
            return Resolution(ResolutionStatus.INTERNAL_ERROR, path=path)

        result.modification_date = modification_date
        result.raw_contents = contents
        self.logger.debug("Resolved %s from %s (%d server blocks)", domain, path, len(result.blocks))
        return Resolution(ResolutionStatus.FOUND, result=result, path=path)
