"""
Provider Client - Factory for slave zone provider APIs

This module selects the provider implementation named in the configuration,
currently supporting Linode and an in-memory mock.
"""

import logging

from .base_provider import SlaveZoneProvider
from .linode_provider import LinodeProvider
from .mock_provider import MockSlaveZoneProvider
from ..utils.config import SyncConfig

logger = logging.getLogger(__name__)

_shared_mocks = {}


def create_provider(config: SyncConfig, api_key: str) -> SlaveZoneProvider:
    """Get slave zone provider based on configuration."""
    if config.provider == "linode":
        return LinodeProvider(api_key, config.provider_options)
    elif config.provider == "mock":
        return _mock_for(api_key)
    else:
        logger.warning(f"Unknown provider '{config.provider}', using mock provider")
        return _mock_for(api_key)


def _mock_for(api_key: str) -> MockSlaveZoneProvider:
    """One in-memory provider per key so state survives across events."""
    if api_key not in _shared_mocks:
        _shared_mocks[api_key] = MockSlaveZoneProvider()
    return _shared_mocks[api_key]
