"""
Zone lifecycle events.

The control panel announces SOA changes under three event names. Hosts
either call a ZoneEventHandler directly or route named events through an
EventDispatcher.
"""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Callable, Dict, List

from .models import SyncReport, ZoneChangeEvent

logger = logging.getLogger(__name__)

SOA_INSERT = "dns_soa_insert"
SOA_UPDATE = "dns_soa_update"
SOA_DELETE = "dns_soa_delete"

SOA_EVENTS = (SOA_INSERT, SOA_UPDATE, SOA_DELETE)


class ZoneEventHandler(ABC):
    """Receiver of the three SOA lifecycle events."""

    @abstractmethod
    def on_zone_created(self, event: ZoneChangeEvent) -> SyncReport:
        """Called when a SOA is created."""
        pass

    @abstractmethod
    def on_zone_updated(self, event: ZoneChangeEvent) -> SyncReport:
        """Called when a SOA is updated."""
        pass

    @abstractmethod
    def on_zone_deleted(self, event: ZoneChangeEvent) -> SyncReport:
        """Called when a SOA is deleted."""
        pass


class EventDispatcher:
    """Routes named events to the callbacks registered for them."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable]] = defaultdict(list)

    def register(self, event_name: str, callback: Callable[[ZoneChangeEvent], SyncReport]):
        self._handlers[event_name].append(callback)
        logger.debug(f"Registered {getattr(callback, '__qualname__', callback)} for {event_name}")

    def dispatch(self, event_name: str, event: ZoneChangeEvent) -> List[SyncReport]:
        """Call every handler registered for ``event_name`` in order."""
        callbacks = self._handlers.get(event_name)
        if not callbacks:
            logger.debug(f"No handlers registered for {event_name}")
            return []

        return [callback(event) for callback in callbacks]
