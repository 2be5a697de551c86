"""
Core slave zone synchronization functionality.

This package contains the data model, the SOA reconciler and the
event-facing plugin.
"""

from .models import RemoteZoneRecord, SyncReport, ZoneChangeEvent, ZoneSnapshot
from .reconciler import SOAReconciler
from .events import EventDispatcher, ZoneEventHandler
from .plugin import SlaveZonePlugin

__all__ = [
    "RemoteZoneRecord",
    "SyncReport",
    "ZoneChangeEvent",
    "ZoneSnapshot",
    "SOAReconciler",
    "EventDispatcher",
    "ZoneEventHandler",
    "SlaveZonePlugin",
]
