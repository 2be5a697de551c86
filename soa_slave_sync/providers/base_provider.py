"""
Base slave zone provider interface.

This module defines the abstract base class that all slave zone providers
must implement. Expected API failures come back as a ProviderResponse with
an error list; only transport failures raise ProviderClientError.
"""

from abc import ABC, abstractmethod
from typing import List

from ..core.models import ProviderResponse


class ProviderClientError(Exception):
    """Raised when the provider API could not be reached or understood."""


class SlaveZoneProvider(ABC):
    """Abstract base class for slave zone providers."""

    @abstractmethod
    def list_domains(self) -> ProviderResponse:
        """List all domains; ``data`` is a list of RemoteZoneRecord."""
        pass

    @abstractmethod
    def create_domain(self, domain: str, type: str, master_ips: List[str]) -> ProviderResponse:
        """Create a new domain."""
        pass

    @abstractmethod
    def update_domain(self, remote_id: str, master_ips: List[str]) -> ProviderResponse:
        """Replace the master IPs of an existing domain."""
        pass

    @abstractmethod
    def delete_domain(self, remote_id: str) -> ProviderResponse:
        """Delete a domain."""
        pass
