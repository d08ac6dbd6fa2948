"""Scanner package - Finds site configuration files on disk.

Scanners locate and stat files; they never interpret configuration text.
"""

from nginx_resolver.scanner.domain import is_valid_domain
from nginx_resolver.scanner.sites import SiteConfigLocator, file_modification_date

__all__ = ["SiteConfigLocator", "file_modification_date", "is_valid_domain"]
