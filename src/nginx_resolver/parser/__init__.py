"""Parser package - Converts raw site configuration text into structured models.

Parsers do NOT touch the filesystem layout - locating files is the
scanner's job.
"""

from nginx_resolver.parser.site_conf import SiteConfigParser

__all__ = ["SiteConfigParser"]
