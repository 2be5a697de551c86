"""
Slave zone plugin.

Connects the control panel's SOA events to the SOA reconciler so that the
provider acts as a redundant secondary nameserver. The master must allow
zone transfers (xfer) from the provider's nameservers.
"""

import logging
from typing import Optional

from .events import SOA_DELETE, SOA_INSERT, SOA_UPDATE, EventDispatcher, ZoneEventHandler
from .models import SyncReport, ZoneChangeEvent
from .reconciler import SOAReconciler
from ..utils.config import SyncConfig

logger = logging.getLogger(__name__)


class SlaveZonePlugin(ZoneEventHandler):
    """Creates, updates and deletes provider slave zones to match SOAs."""

    plugin_name = "slave_zone_plugin"

    def __init__(self, config: SyncConfig, reconciler: Optional[SOAReconciler] = None):
        self.config = config
        self.reconciler = reconciler or SOAReconciler(config)

    def on_install(self) -> bool:
        """Whether the host should enable this plugin."""
        return self.config.enabled

    def on_load(self, dispatcher: EventDispatcher) -> None:
        """Register for the SOA events."""
        dispatcher.register(SOA_INSERT, self.on_zone_created)
        dispatcher.register(SOA_UPDATE, self.on_zone_updated)
        dispatcher.register(SOA_DELETE, self.on_zone_deleted)
        logger.debug(f"{self.plugin_name} loaded")

    def on_zone_created(self, event: ZoneChangeEvent) -> SyncReport:
        return self.reconciler.upsert(event)

    def on_zone_updated(self, event: ZoneChangeEvent) -> SyncReport:
        return self.reconciler.upsert(event)

    def on_zone_deleted(self, event: ZoneChangeEvent) -> SyncReport:
        return self.reconciler.delete(event)
