"""
Mock slave zone provider for testing and demonstration.

This module provides a mock provider that stores slave zones in memory
for safe testing and demonstration purposes.
"""

import itertools
import logging
from collections import defaultdict
from typing import Dict, List, Optional

from .base_provider import SlaveZoneProvider
from ..core.models import ProviderError, ProviderResponse, RemoteZoneRecord

logger = logging.getLogger(__name__)


class MockSlaveZoneProvider(SlaveZoneProvider):
    """Mock provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        self.domains: List[RemoteZoneRecord] = []
        self.calls: List[tuple] = []
        self._queued_errors = defaultdict(list)
        self._ids = itertools.count(1)
        logger.info("Mock slave zone provider initialized")

    def fail_next(self, operation: str, code: str = "400", message: str = "mock error"):
        """Make the next call of ``operation`` report an API error."""
        self._queued_errors[operation].append(ProviderError(code, message))

    def _pop_error(self, operation: str) -> Optional[ProviderResponse]:
        if self._queued_errors[operation]:
            return ProviderResponse(errors=[self._queued_errors[operation].pop(0)])
        return None

    def list_domains(self) -> ProviderResponse:
        """List all domains."""
        self.calls.append(("list_domains",))
        failure = self._pop_error("list_domains")
        if failure:
            return failure

        logger.info(f"Mock: Retrieved {len(self.domains)} domains")
        return ProviderResponse(data=list(self.domains))

    def create_domain(self, domain: str, type: str, master_ips: List[str]) -> ProviderResponse:
        """Create a new domain."""
        self.calls.append(("create_domain", domain, type, list(master_ips)))
        failure = self._pop_error("create_domain")
        if failure:
            return failure

        record = RemoteZoneRecord(str(next(self._ids)), domain, list(master_ips), type)
        self.domains.append(record)
        logger.info(f"Mock: Created {type} domain {domain} -> {', '.join(master_ips)}")
        return ProviderResponse(data=record)

    def update_domain(self, remote_id: str, master_ips: List[str]) -> ProviderResponse:
        """Replace the master IPs of an existing domain."""
        self.calls.append(("update_domain", remote_id, list(master_ips)))
        failure = self._pop_error("update_domain")
        if failure:
            return failure

        for record in self.domains:
            if record.remote_id == remote_id:
                record.master_ips = list(master_ips)
                logger.info(f"Mock: Updated domain {record.domain_name} -> {', '.join(master_ips)}")
                return ProviderResponse(data=record)

        return ProviderResponse(errors=[ProviderError("404", "Not found")])

    def delete_domain(self, remote_id: str) -> ProviderResponse:
        """Delete a domain."""
        self.calls.append(("delete_domain", remote_id))
        failure = self._pop_error("delete_domain")
        if failure:
            return failure

        for i, record in enumerate(self.domains):
            if record.remote_id == remote_id:
                del self.domains[i]
                logger.info(f"Mock: Deleted domain {record.domain_name}")
                return ProviderResponse(data={})

        return ProviderResponse(errors=[ProviderError("404", "Not found")])
