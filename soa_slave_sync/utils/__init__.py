"""
Utility functions and helpers.

This package contains validation, name normalization, configuration
and nameserver resolution helpers.
"""

from .validators import normalize_domain, validate_fqdn, validate_ipv4
from .resolver import NameserverResolver

__all__ = ["normalize_domain", "validate_fqdn", "validate_ipv4", "NameserverResolver"]
