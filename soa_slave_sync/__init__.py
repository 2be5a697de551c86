"""
SOA Slave Sync - Redundant secondary DNS through a hosted provider

Mirrors a DNS control panel's SOA zones into a third-party provider's
slave zones, so the provider serves them as a secondary nameserver.
"""

__version__ = "1.0.0"
__author__ = "SOA Slave Sync Team"
__description__ = "Synchronize control panel SOA zones into provider slave zones"

from .core.reconciler import SOAReconciler
from .core.plugin import SlaveZonePlugin
from .utils.config import SyncConfig

__all__ = [
    "SOAReconciler",
    "SlaveZonePlugin",
    "SyncConfig",
]
