"""
Nameserver resolution.

Looks up the address of a zone's master nameserver using the dnspython
library. The address becomes the master IP of the provider's slave zone.
"""

import logging
from typing import Dict, Optional

import dns.exception
import dns.resolver

from .validators import normalize_hostname, validate_ipv4

logger = logging.getLogger(__name__)


class NameserverResolver:
    """Resolve nameserver hostnames to their first usable IPv4 address."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize resolver from the optional ``resolver`` config section."""
        config = config or {}
        self.nameservers = config.get("nameservers") or []
        self.port = config.get("port", 53)
        self.timeout = config.get("timeout", 5)

        self.resolver = self._initialize_dns_resolver()

    def _initialize_dns_resolver(self) -> dns.resolver.Resolver:
        """Use the system resolver unless nameservers are configured."""
        resolver = dns.resolver.Resolver(configure=not self.nameservers)
        resolver.port = self.port
        if self.nameservers:
            resolver.nameservers = list(self.nameservers)
        resolver.lifetime = self.timeout
        return resolver

    def lookup(self, hostname: str) -> Optional[str]:
        """Return the first A record of ``hostname`` or None."""
        hostname = normalize_hostname(hostname)
        if not hostname:
            logger.warning("Could not establish the IP for the master server")
            return None

        try:
            answers = self.resolver.resolve(hostname, "A")
        except dns.exception.DNSException as e:
            logger.debug(f"DNS query failed for {hostname}: {e}")
            answers = []

        for answer in answers:
            address = str(answer)
            if validate_ipv4(address):
                logger.debug(f"Master dns server ip: {address}")
                return address

        logger.warning("Could not establish the IP for the master server")
        return None
