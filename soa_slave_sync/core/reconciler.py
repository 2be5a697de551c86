"""
SOA Reconciler - Core logic for slave zone synchronization

This module maps the before/after state of a control panel SOA onto the
provider's slave zones: it creates a slave for a new or unchanged zone,
points an existing slave at a new master when the nameserver changed, and
removes the slave when the zone is renamed, deactivated or deleted.

Every failure is logged and ends the handling of the current event only;
the caller always gets a SyncReport back.
"""

import logging
from typing import Callable, List, Optional

from .models import (
    ProviderResponse,
    RemoteZoneRecord,
    SyncReport,
    ZoneChangeEvent,
)
from ..providers.base_provider import ProviderClientError, SlaveZoneProvider
from ..providers.provider_client import create_provider
from ..utils.config import SyncConfig
from ..utils.resolver import NameserverResolver
from ..utils.validators import normalize_domain, normalize_hostname

logger = logging.getLogger(__name__)

SLAVE_TYPE = "slave"


class SOAReconciler:
    """Keeps the provider's slave zones in step with control panel SOAs."""

    def __init__(
        self,
        config: SyncConfig,
        resolver: Optional[NameserverResolver] = None,
        provider_factory: Optional[Callable[[SyncConfig, str], SlaveZoneProvider]] = None,
    ):
        """Initialize reconciler with configuration and collaborators."""
        self.config = config
        self.resolver = resolver or NameserverResolver(config.resolver_options)
        self.provider_factory = provider_factory or create_provider

    def upsert(self, event: ZoneChangeEvent) -> SyncReport:
        """Create or update the slave zone for ``event.current``."""
        report = SyncReport()
        zone = event.current

        if zone.is_empty:
            logger.debug("No current zone data, nothing to update")
            return report.abort("no current zone data", failed=False)

        domain = zone.domain
        ns = zone.nameserver
        master_ip = self.resolver.lookup(ns) if ns else None

        if not domain or not ns or not master_ip:
            logger.warning("Failed to update dns slave due to missing data.")
            return report.abort("missing data")

        api_key = self.config.get_api_key()
        if api_key is None:
            logger.warning("Could not update/create slave. No api key.")
            return report.abort("no api key")

        try:
            provider = self.provider_factory(self.config, api_key)
            response = provider.list_domains()
            if self.has_errors(response):
                logger.warning(f"Failed to list the dns domains {domain}")
                return report.abort("domain listing failed")
            domains = response.data or []

            if zone.active:
                if self._nameserver_changed(event):
                    self._update_slave(provider, domains, domain, master_ip, report)
                else:
                    self._create_slave(provider, domain, master_ip, report)
            else:
                logger.debug("Zone is not active.")

            # the domain name has changed or the zone went inactive, drop the old slave
            if self._origin_changed(event) or not zone.active:
                report.merge(self.delete(event, domains))
        except ProviderClientError as e:
            logger.warning(f"Could not update/create dns slave. {e}")
            report.abort(str(e))

        return report

    def delete(
        self, event: ZoneChangeEvent, remote_records: Optional[List[RemoteZoneRecord]] = None
    ) -> SyncReport:
        """Delete the slave zone for ``event.previous``."""
        report = SyncReport()
        zone = event.previous

        if zone.is_empty:
            logger.warning("Could not delete dns slave. No passed data.")
            return report.abort("no previous zone data", failed=False)

        domain = zone.domain
        if not domain:
            logger.warning("Failed to delete dns slave due to missing data.")
            return report.abort("missing data")

        api_key = self.config.get_api_key()
        if api_key is None:
            logger.warning("Could not delete dns slave. No api key.")
            return report.abort("no api key")

        try:
            provider = self.provider_factory(self.config, api_key)
            if remote_records is None:
                response = provider.list_domains()
                if self.has_errors(response):
                    logger.warning(f"Failed to list the dns domains {domain}")
                    return report.abort("domain listing failed")
                remote_records = response.data or []

            record = self.find_remote_record(remote_records, domain)
            if record is not None:
                response = provider.delete_domain(record.remote_id)
                if not self.has_errors(response):
                    logger.debug(f"Deleted dns slave for {domain}")
                    report.record("delete", domain, True, record.remote_id)
                else:
                    logger.warning(f"Failed to delete dns slave for {domain}")
                    report.record("delete", domain, False, record.remote_id,
                                  self._error_summary(response))
        except ProviderClientError as e:
            logger.warning(f"Could not delete dns slave. {e}")
            report.abort(str(e))

        return report

    def _create_slave(self, provider: SlaveZoneProvider, domain: str, master_ip: str,
                      report: SyncReport) -> None:
        response = provider.create_domain(domain, SLAVE_TYPE, [master_ip])
        if not self.has_errors(response):
            logger.debug(f"Created a new dns slave record for {domain}")
            remote_id = getattr(response.data, "remote_id", None)
            report.record("create", domain, True, remote_id)
        else:
            logger.warning(f"Failed to create a new dns slave record for {domain}")
            report.record("create", domain, False, message=self._error_summary(response))

    def _update_slave(self, provider: SlaveZoneProvider, domains: List[RemoteZoneRecord],
                      domain: str, master_ip: str, report: SyncReport) -> None:
        record = self.find_remote_record(domains, domain)
        if record is None:
            logger.debug(f"No dns slave record found for {domain}, nothing to update")
            return

        response = provider.update_domain(record.remote_id, [master_ip])
        if not self.has_errors(response):
            logger.debug(f"Updated the dns slave record for {domain}")
            report.record("update", domain, True, record.remote_id)
        else:
            logger.warning(f"Failed to update the dns slave record for {domain}")
            report.record("update", domain, False, record.remote_id,
                          self._error_summary(response))

    @staticmethod
    def _nameserver_changed(event: ZoneChangeEvent) -> bool:
        old_ns = normalize_hostname(event.previous.nameserver)
        return bool(old_ns) and old_ns != normalize_hostname(event.current.nameserver)

    @staticmethod
    def _origin_changed(event: ZoneChangeEvent) -> bool:
        old_domain = event.previous.domain
        return bool(old_domain) and old_domain != event.current.domain

    @staticmethod
    def find_remote_record(records: List[RemoteZoneRecord], domain: str) -> Optional[RemoteZoneRecord]:
        """Return the first remote record named ``domain``."""
        for record in records:
            if normalize_domain(record.domain_name) == domain:
                return record
        return None

    @staticmethod
    def has_errors(response: Optional[ProviderResponse]) -> bool:
        """Log every embedded API error; True when there was at least one."""
        if response is not None and response.errors:
            for error in response.errors:
                logger.error(f"api error {error.code} - {error.message}")
            return True
        return False

    @staticmethod
    def _error_summary(response: ProviderResponse) -> str:
        return "; ".join(f"{e.code} - {e.message}" for e in response.errors)
