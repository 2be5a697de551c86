"""
Data models for SOA slave synchronization.

These value objects carry zone state from the control panel, the provider's
view of its slave zones, and the outcome of every provider call.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..utils.validators import normalize_domain


@dataclass
class ZoneSnapshot:
    """SOA state of a zone at one point in time."""

    id: Optional[str] = None
    origin: Optional[str] = None
    nameserver: Optional[str] = None
    active: bool = False

    @property
    def is_empty(self) -> bool:
        """A snapshot without an id carries no data."""
        return not self.id

    @property
    def domain(self) -> str:
        return normalize_domain(self.origin)


@dataclass
class ZoneChangeEvent:
    """Before/after pair delivered on zone insert, update and delete."""

    previous: ZoneSnapshot = field(default_factory=ZoneSnapshot)
    current: ZoneSnapshot = field(default_factory=ZoneSnapshot)


@dataclass
class RemoteZoneRecord:
    """A slave zone as the provider reports it."""

    remote_id: str
    domain_name: str
    master_ips: List[str] = field(default_factory=list)
    type: str = "slave"


@dataclass
class ProviderError:
    code: str
    message: str


@dataclass
class ProviderResponse:
    """Result of a provider call: a payload or an embedded error list."""

    data: Any = None
    errors: List[ProviderError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class SyncAction:
    """One provider mutation attempted while handling an event."""

    operation: str
    domain: str
    success: bool
    remote_id: Optional[str] = None
    message: str = ""


@dataclass
class SyncReport:
    """Everything the reconciler attempted for a single event."""

    actions: List[SyncAction] = field(default_factory=list)
    aborted: bool = False
    failed: bool = False
    reason: str = ""

    def record(self, operation: str, domain: str, success: bool,
               remote_id: Optional[str] = None, message: str = "") -> SyncAction:
        action = SyncAction(operation, domain, success, remote_id, message)
        self.actions.append(action)
        return action

    def abort(self, reason: str, failed: bool = True) -> "SyncReport":
        """Mark the event as stopped early; skipped work is not a failure."""
        self.aborted = True
        self.failed = self.failed or failed
        self.reason = reason
        return self

    def merge(self, other: "SyncReport") -> None:
        self.actions.extend(other.actions)
        self.failed = self.failed or other.failed
        if other.aborted and not self.aborted:
            self.aborted = True
            self.reason = other.reason

    @property
    def success(self) -> bool:
        return not self.failed and all(action.success for action in self.actions)
