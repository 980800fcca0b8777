"""commdomain — registry of communication domain codes."""

from commdomain.domain.registry import (
    DOMAIN_CODES,
    domain_for_name,
    is_valid_domain,
    iter_domains,
    lookup_domain,
)
from commdomain.domain.types import Domain

__version__ = "0.3.0"

__all__ = [
    "DOMAIN_CODES",
    "Domain",
    "__version__",
    "domain_for_name",
    "is_valid_domain",
    "iter_domains",
    "lookup_domain",
]
