import json
import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from ..core.models import ZoneChangeEvent, ZoneSnapshot
from ..utils.validators import normalize_domain, validate_fqdn

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"y", "yes", "true", "1"}


def parse_event(data: Optional[Dict]) -> ZoneChangeEvent:
    """Build a ZoneChangeEvent from a ``{"old": {...}, "new": {...}}`` payload."""
    data = data or {}
    return ZoneChangeEvent(
        previous=parse_snapshot(data.get("old")),
        current=parse_snapshot(data.get("new")),
    )


def parse_snapshot(row: Optional[Dict]) -> ZoneSnapshot:
    """Convert a control panel SOA row into a ZoneSnapshot."""
    if not row:
        return ZoneSnapshot()

    origin = row.get("origin")
    if origin and not validate_fqdn(normalize_domain(origin)):
        logger.warning(f"Zone origin '{origin}' is not a valid domain name")

    zone_id = row.get("id")
    return ZoneSnapshot(
        id=str(zone_id) if zone_id not in (None, "") else None,
        origin=origin,
        nameserver=row.get("ns") or row.get("nameserver"),
        active=_parse_active(row.get("active")),
    )


def _parse_active(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_VALUES


def load_event_file(path: str) -> ZoneChangeEvent:
    """Read a JSON or YAML payload file."""
    payload_path = Path(path)
    try:
        with open(payload_path, "r") as f:
            if payload_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Event payload not found: {path}")
    except (ValueError, yaml.YAMLError) as e:
        raise ValueError(f"Error parsing event payload: {e}")

    if data is not None and not isinstance(data, dict):
        raise ValueError("Event payload must be a mapping with 'old' and 'new' keys")

    logger.info(f"Loaded event payload from {path}")
    return parse_event(data)
