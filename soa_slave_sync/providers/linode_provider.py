"""
Linode DNS provider implementation.

This module talks to the Linode API v4 domain endpoints using the requests
library. Linode serves a slave domain by pulling it from the listed master
IPs, so the master must allow zone transfers from Linode's nameservers.
"""

import logging
from typing import Dict, List, Optional

import requests

from .base_provider import ProviderClientError, SlaveZoneProvider
from ..core.models import ProviderError, ProviderResponse, RemoteZoneRecord

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.linode.com/v4"


class LinodeProvider(SlaveZoneProvider):
    """Linode DNS Manager client for slave domains."""

    def __init__(self, api_key: str, config: Optional[Dict] = None):
        """Initialize Linode provider."""
        config = config or {}
        self.api_url = config.get("api_url", DEFAULT_API_URL).rstrip("/")
        self.timeout = config.get("timeout", 30)
        self.page_size = config.get("page_size", 100)

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

        logger.debug(f"Linode provider initialized for {self.api_url}")

    def list_domains(self) -> ProviderResponse:
        """List all domains, following pagination."""
        records = []
        page = 1
        while True:
            response = self._request(
                "GET", "/domains", params={"page": page, "page_size": self.page_size}
            )
            if not response.ok:
                return response

            body = response.data or {}
            records.extend(self._to_record(d) for d in body.get("data", []))

            if page >= body.get("pages", 1):
                break
            page += 1

        logger.debug(f"Retrieved {len(records)} domains from Linode")
        return ProviderResponse(data=records)

    def create_domain(self, domain: str, type: str, master_ips: List[str]) -> ProviderResponse:
        """Create a new domain."""
        response = self._request(
            "POST",
            "/domains",
            json={"domain": domain, "type": type, "master_ips": list(master_ips)},
        )
        if response.ok:
            response.data = self._to_record(response.data or {})
        return response

    def update_domain(self, remote_id: str, master_ips: List[str]) -> ProviderResponse:
        """Replace the master IPs of an existing domain."""
        response = self._request(
            "PUT", f"/domains/{remote_id}", json={"master_ips": list(master_ips)}
        )
        if response.ok:
            response.data = self._to_record(response.data or {})
        return response

    def delete_domain(self, remote_id: str) -> ProviderResponse:
        """Delete a domain."""
        return self._request("DELETE", f"/domains/{remote_id}")

    def _request(self, method: str, path: str, **kwargs) -> ProviderResponse:
        """Send a request and fold API errors into the response."""
        url = f"{self.api_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ProviderClientError(f"{method} {url} failed: {e}") from e

        try:
            body = resp.json() if resp.content else {}
        except ValueError:
            body = None

        if resp.ok:
            if body is None:
                raise ProviderClientError(f"{method} {url} returned a non-JSON body")
            return ProviderResponse(data=body)

        return ProviderResponse(data=body, errors=self._parse_errors(resp, body))

    def _parse_errors(self, resp: requests.Response, body) -> List[ProviderError]:
        """Convert a Linode error body into ProviderErrors."""
        errors = []
        if isinstance(body, dict):
            for error in body.get("errors") or []:
                code = str(resp.status_code)
                if error.get("field"):
                    code = f"{code}/{error['field']}"
                errors.append(ProviderError(code, error.get("reason", "unknown error")))

        if not errors:
            errors.append(ProviderError(str(resp.status_code), resp.reason or "HTTP error"))
        return errors

    def _to_record(self, domain: Dict) -> RemoteZoneRecord:
        return RemoteZoneRecord(
            remote_id=str(domain.get("id", "")),
            domain_name=domain.get("domain", ""),
            master_ips=list(domain.get("master_ips") or []),
            type=domain.get("type", ""),
        )
