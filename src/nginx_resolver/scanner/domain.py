"""Domain name validation."""

import re

# Lowercase labels separated by dots, ending in an alphabetic TLD of 2-24 chars
DOMAIN_RE = re.compile(r"^[a-z0-9-]+(\.[a-z0-9-]+)*\.[a-z]{2,24}$")


def is_valid_domain(domain: object) -> bool:
    """Check whether a string looks like a domain name.

    Uppercase letters, underscores and leading or trailing dots are
    rejected. The check is purely syntactic.
    """
    if not isinstance(domain, str):
        return False
    return DOMAIN_RE.fullmatch(domain) is not None
