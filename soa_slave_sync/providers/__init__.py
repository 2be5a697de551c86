"""
Slave zone provider implementations.

This package contains the provider interface, the Linode API client
and a mock provider.
"""

from .base_provider import ProviderClientError, SlaveZoneProvider
from .linode_provider import LinodeProvider
from .mock_provider import MockSlaveZoneProvider
from .provider_client import create_provider

__all__ = [
    "ProviderClientError",
    "SlaveZoneProvider",
    "LinodeProvider",
    "MockSlaveZoneProvider",
    "create_provider",
]
