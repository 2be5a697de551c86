"""
Explicit configuration for the slave zone synchronizer.

The raw configuration is the dictionary loaded from YAML by the CLI. It is
converted once into a SyncConfig that is handed to the plugin and the
reconciler; nothing reads configuration from global state.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "linode"


@dataclass
class SyncConfig:
    """Settings the reconciler needs to reach the provider."""

    enabled: bool = False
    provider: str = DEFAULT_PROVIDER
    api_key: Optional[str] = None
    provider_options: Dict = field(default_factory=dict)
    resolver_options: Dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config: Optional[Dict]) -> "SyncConfig":
        """Build a SyncConfig from the loaded YAML configuration."""
        config = config or {}
        provider = config.get("default_provider", DEFAULT_PROVIDER)
        provider_options = dict(
            (config.get("dns_providers") or {}).get(provider) or {}
        )
        api_key = provider_options.pop("api_key", None) or None

        return cls(
            enabled=bool((config.get("slave_sync") or {}).get("enabled", False)),
            provider=provider,
            api_key=api_key,
            provider_options=provider_options,
            resolver_options=dict(config.get("resolver") or {}),
        )

    def get_api_key(self) -> Optional[str]:
        """Return the provider API key, logging when it is not set."""
        if self.api_key:
            return self.api_key

        logger.warning("API key not set")
        return None
