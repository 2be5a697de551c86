"""
Validators - Input validation and normalization for zone data

This module provides validation functions for domain names and IPv4
addresses, plus the normalization used to compare zone origins with the
provider's domain names.
"""

import ipaddress
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)


def validate_fqdn(fqdn: str) -> bool:
    """
    Validate Fully Qualified Domain Name (FQDN).

    Args:
        fqdn: The FQDN to validate, without a trailing dot

    Returns:
        True if valid, False otherwise
    """
    if not fqdn or not isinstance(fqdn, str):
        return False

    if fqdn.endswith("."):
        logger.warning(f"FQDN ends with dot: {fqdn}")
        return False

    if len(fqdn) > 253:
        logger.warning(f"FQDN too long: {fqdn}")
        return False

    labels = fqdn.split(".")

    if len(labels) < 2:
        logger.warning(f"FQDN must have at least 2 labels: {fqdn}")
        return False

    if any(label == "" for label in labels):
        logger.warning(f"FQDN contains empty labels: {fqdn}")
        return False

    for label in labels:
        if not _validate_label(label):
            logger.warning(f"Invalid label '{label}' in FQDN: {fqdn}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """
    Validate a single domain label.

    Labels can contain letters, digits and hyphens, and cannot start or
    end with a hyphen. Zone origins may start with a digit (e.g. reverse
    zones), so no RFC 1123 first-letter rule is applied.
    """
    if len(label) == 0 or len(label) > 63:
        return False

    return bool(re.match(r"^[a-zA-Z0-9_]([a-zA-Z0-9_-]*[a-zA-Z0-9_])?$", label))


def validate_ipv4(ipv4: str) -> bool:
    """
    Validate IPv4 address.

    Args:
        ipv4: The IPv4 address to validate

    Returns:
        True if valid, False otherwise
    """
    if not ipv4 or not isinstance(ipv4, str):
        return False

    try:
        ipaddress.IPv4Address(ipv4.strip())
        return True
    except ipaddress.AddressValueError:
        logger.warning(f"Invalid IPv4 address: {ipv4}")
        return False


def normalize_domain(name: Optional[str]) -> str:
    """
    Normalize a zone origin or provider domain name for comparison.

    Strips surrounding dots and whitespace and lower-cases the result.
    ``None`` becomes an empty string.
    """
    if not name:
        return ""

    return name.strip(". \t\r\n").lower()


def normalize_hostname(name: Optional[str]) -> str:
    """Normalize a nameserver hostname, dropping the root dot."""
    if not name:
        return ""

    return name.strip().rstrip(".").lower()
