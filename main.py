#!/usr/bin/env python3
"""
SOA Slave Sync - Main Entry Point

This is the main entry point for SOA Slave Sync.
It can be run directly or imported as a module.
"""

from soa_slave_sync.cli.main import main

if __name__ == "__main__":
    main()
