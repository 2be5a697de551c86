"""
Parsers for control panel event payloads.
"""

from .event_payload import load_event_file, parse_event, parse_snapshot

__all__ = ["load_event_file", "parse_event", "parse_snapshot"]
