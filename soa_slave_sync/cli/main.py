#!/usr/bin/env python3
"""
SOA Slave Sync - Command Line Interface

Replays a control panel SOA event against the configured provider.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

import yaml
from rich.console import Console
from rich.table import Table

from ..core.events import SOA_EVENTS, EventDispatcher
from ..core.models import SyncReport
from ..core.plugin import SlaveZonePlugin
from ..parsers.event_payload import load_event_file
from ..utils.config import SyncConfig

console = Console()
logger = logging.getLogger(__name__)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="SOA Slave Sync - Mirror SOA changes into provider slave zones"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--event", "-e", required=True, choices=SOA_EVENTS, help="SOA event to replay"
    )

    parser.add_argument(
        "--data", "-d", required=True, help="JSON or YAML file with the old/new SOA rows"
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args()

    if not Path(args.data).exists():
        print(f"Error: Event payload '{args.data}' not found")
        sys.exit(1)

    config = load_config(args.config)
    config_logger(config, args.verbose)

    try:
        plugin = SlaveZonePlugin(SyncConfig.from_dict(config))
        if not plugin.on_install():
            print("Slave zone sync is disabled in the configuration")
            sys.exit(0)

        dispatcher = EventDispatcher()
        plugin.on_load(dispatcher)

        reports = dispatcher.dispatch(args.event, load_event_file(args.data))
        display_reports(reports)

        if all(report.success for report in reports):
            print("Slave zone sync completed successfully")
            sys.exit(0)
        else:
            print("Slave zone sync failed")
            sys.exit(1)

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def display_reports(reports: List[SyncReport]):
    """Display the provider actions taken for the event."""
    table = Table(title="Slave Zone Changes")
    table.add_column("Operation", style="cyan")
    table.add_column("Domain", style="magenta")
    table.add_column("Remote ID", style="white")
    table.add_column("Result", style="white")

    for report in reports:
        for action in report.actions:
            result = "[green]ok[/green]" if action.success else f"[red]{action.message or 'failed'}[/red]"
            table.add_row(action.operation, action.domain, action.remote_id or "-", result)

    console.print(table)

    for report in reports:
        if report.aborted:
            style = "red" if report.failed else "yellow"
            console.print(f"[{style}]Stopped early: {report.reason}[/{style}]")


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "slave_sync": {"enabled": False},
        "dns_providers": {"mock": {}},
        "default_provider": "mock",
        "logging": {"level": "INFO", "file": "soa_slave_sync.log"},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
        log_file = logging_config.get("file", "soa_slave_sync.log")

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler(sys.stdout),
            ],
        )
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
